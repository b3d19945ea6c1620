def test_user_profile_requires_session(client):
    assert client.get("/api/user-profile").status_code == 401
    assert client.post("/api/user-profile", json={"selectedTemplate": "designer"}).status_code == 401


def test_first_access_creates_defaults(client, session_headers):
    response = client.get("/api/user-profile", headers=session_headers("user-1", "jane.doe@example.com"))

    assert response.status_code == 200
    profile = response.json()
    assert profile["userId"] == "user-1"
    assert profile["username"] == "jane.doe"
    assert profile["selectedTemplate"] == "developer"
    assert profile["customizations"] == {
        "colorScheme": {"primary": "#3B82F6", "secondary": "#1E293B", "accent": "#10B981"},
        "layout": {"showBlog": False, "showTestimonials": False, "showCertifications": False},
    }
    assert profile["seoSettings"] == {
        "title": "Professional Portfolio",
        "description": "Welcome to my professional portfolio",
        "keywords": [],
    }


def test_username_falls_back_without_email(client, session_headers):
    profile = client.get("/api/user-profile", headers=session_headers("user-1", None)).json()
    assert profile["username"] == "user"


def test_repeated_access_returns_the_same_record(client, session_headers, db):
    headers = session_headers("user-1", "jane@example.com")

    first = client.get("/api/user-profile", headers=headers).json()
    second = client.get("/api/user-profile", headers=headers).json()

    assert first["id"] == second["id"]
    assert db["user_profiles"].count_documents({"userId": "user-1"}) == 1


def test_public_lookup_never_creates(client, db):
    response = client.get("/api/portfolio/nobody")

    assert response.status_code == 404
    assert response.json()["detail"] == "Portfolio not found"
    assert db["user_profiles"].count_documents({}) == 0


def test_public_lookup_is_exact_match(client, session_headers):
    client.get("/api/user-profile", headers=session_headers("user-1", "jane@example.com"))

    assert client.get("/api/portfolio/jane").status_code == 200
    assert client.get("/api/portfolio/Jane").status_code == 404


def test_invalid_template_is_rejected_without_writing(client, session_headers, db):
    headers = session_headers("user-1", "jane@example.com")
    client.get("/api/user-profile", headers=headers)
    before = db["user_profiles"].find_one({"userId": "user-1"})

    response = client.post("/api/user-profile", json={"selectedTemplate": "brutalist"}, headers=headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Unknown template: brutalist"
    assert db["user_profiles"].find_one({"userId": "user-1"}) == before


def test_invalid_template_does_not_create_a_record(client, session_headers, db):
    response = client.post(
        "/api/user-profile",
        json={"selectedTemplate": "brutalist"},
        headers=session_headers("user-2", "sam@example.com"),
    )

    assert response.status_code == 400
    assert db["user_profiles"].count_documents({}) == 0


def test_selecting_a_template_keeps_other_fields(client, session_headers):
    headers = session_headers("user-1", "jane@example.com")
    client.post(
        "/api/user-profile",
        json={"selectedTemplate": "developer", "seoSettings": {"title": "Jane", "keywords": ["python"]}},
        headers=headers,
    )

    saved = client.post("/api/user-profile", json={"selectedTemplate": "finance"}, headers=headers).json()

    assert saved["selectedTemplate"] == "finance"
    assert saved["seoSettings"] == {"title": "Jane", "description": "", "keywords": ["python"]}
    assert saved["username"] == "jane"


def test_first_save_fills_defaults_for_missing_fields(client, session_headers):
    saved = client.post(
        "/api/user-profile",
        json={"selectedTemplate": "designer"},
        headers=session_headers("user-1", "jane@example.com"),
    ).json()

    assert saved["selectedTemplate"] == "designer"
    assert saved["username"] == "jane"
    assert saved["seoSettings"]["title"] == "Professional Portfolio"


def test_customizations_without_colors_use_template_defaults(client, session_headers):
    saved = client.post(
        "/api/user-profile",
        json={"selectedTemplate": "finance", "customizations": {"layout": {"showCertifications": True}}},
        headers=session_headers("user-1", "jane@example.com"),
    ).json()

    assert saved["customizations"]["colorScheme"] == {"primary": "#1E40AF", "secondary": "#F8FAFC", "accent": "#059669"}
    assert saved["customizations"]["layout"] == {
        "showBlog": False,
        "showTestimonials": False,
        "showCertifications": True,
    }


def test_customizations_without_layout_reset_flags(client, session_headers):
    colors = {"primary": "#111111", "secondary": "#222222", "accent": "#333333"}
    saved = client.post(
        "/api/user-profile",
        json={"selectedTemplate": "designer", "customizations": {"colorScheme": colors}},
        headers=session_headers("user-1", "jane@example.com"),
    ).json()

    assert saved["customizations"]["colorScheme"] == colors
    assert saved["customizations"]["layout"] == {
        "showBlog": False,
        "showTestimonials": False,
        "showCertifications": False,
    }


def test_color_must_be_hex(client, session_headers):
    response = client.post(
        "/api/user-profile",
        json={
            "selectedTemplate": "designer",
            "customizations": {"colorScheme": {"primary": "red", "secondary": "#fff", "accent": "#000"}},
        },
        headers=session_headers("user-1", "jane@example.com"),
    )
    assert response.status_code == 422


def test_username_owned_by_another_tenant_conflicts(client, session_headers, db):
    client.get("/api/user-profile", headers=session_headers("user-1", "jane@example.com"))
    headers = session_headers("user-2", "sam@example.com")
    client.get("/api/user-profile", headers=headers)

    response = client.post("/api/user-profile", json={"selectedTemplate": "developer", "username": "jane"},
                           headers=headers)

    assert response.status_code == 409
    assert db["user_profiles"].find_one({"userId": "user-2"})["username"] == "sam"


def test_tenant_can_rename_itself(client, session_headers):
    headers = session_headers("user-1", "jane@example.com")
    client.get("/api/user-profile", headers=headers)

    saved = client.post("/api/user-profile", json={"selectedTemplate": "developer", "username": "jane-doe"},
                        headers=headers).json()

    assert saved["username"] == "jane-doe"
    assert client.get("/api/portfolio/jane-doe").status_code == 200
    assert client.get("/api/portfolio/jane").status_code == 404


def test_shared_email_local_part_gets_a_free_username(client, session_headers, db):
    first = client.get("/api/user-profile", headers=session_headers("user-1", "jane@a.com"))
    second = client.get("/api/user-profile", headers=session_headers("user-2", "jane@b.com"))
    third = client.get("/api/user-profile", headers=session_headers("user-3", "jane@c.com"))

    assert first.json()["username"] == "jane"
    assert second.status_code == 200
    assert second.json()["username"] == "jane-2"
    assert third.json()["username"] == "jane-3"

    again = client.get("/api/user-profile", headers=session_headers("user-2", "jane@b.com"))
    assert again.json()["id"] == second.json()["id"]
    assert db["user_profiles"].count_documents({}) == 3


def test_first_save_with_taken_default_username(client, session_headers):
    client.get("/api/user-profile", headers=session_headers("user-1", "jane@a.com"))

    saved = client.post(
        "/api/user-profile",
        json={"selectedTemplate": "finance"},
        headers=session_headers("user-2", "jane@b.com"),
    )

    assert saved.status_code == 200
    assert saved.json()["username"] == "jane-2"
