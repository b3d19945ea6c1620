import pytest

import api.portfolio.service as portfolio_service
from errors import StoreFailure
from portfolio_export import create_docx_from_portfolio, create_pdf_from_portfolio, hex_to_rgb
from portfolio_renderer import DomainData, render

PROFILE = {
    "name": "Jane Doe",
    "role": "Product Designer",
    "bio": "I design calm interfaces.",
    "shortBio": "Calm interfaces.",
    "location": "Lisbon",
    "profileImage": "https://example.com/jane.png",
}


@pytest.fixture
def designer_tenant(client, session_headers, auth_headers):
    headers = session_headers("user-1", "jane@example.com")
    client.post(
        "/api/user-profile",
        json={"selectedTemplate": "designer", "customizations": {"layout": {"showTestimonials": True}}},
        headers=headers,
    )
    client.post("/api/profile", json=PROFILE, headers=auth_headers)
    client.post(
        "/api/projects",
        json={"title": "Moodboard", "description": "A calm app", "detailedContent": "Case study",
              "image": "https://example.com/moodboard.png"},
        headers=auth_headers,
    )
    return "jane"


def test_rendered_page_uses_selected_template(client, designer_tenant):
    response = client.get(f"/portfolio/{designer_tenant}")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Selected Works" in response.text
    assert "Client Love" in response.text
    assert "Moodboard" in response.text
    assert "Jane Doe" in response.text
    assert "--template-primary: #8B5CF6" in response.text


def test_unknown_username_renders_not_found_page(client, db):
    response = client.get("/portfolio/ghost")

    assert response.status_code == 404
    assert "Portfolio Not Found" in response.text
    assert db["user_profiles"].count_documents({}) == 0


def test_unknown_username_export_is_json_not_found(client):
    response = client.get("/portfolio/ghost", params={"format": "pdf"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Portfolio not found"


def test_unsupported_format_is_bad_request(client, designer_tenant):
    assert client.get(f"/portfolio/{designer_tenant}", params={"format": "odt"}).status_code == 400


def test_pdf_export(client, designer_tenant):
    response = client.get(f"/portfolio/{designer_tenant}", params={"format": "pdf"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")
    assert response.headers["content-disposition"] == 'attachment; filename="Jane Doe portfolio - Designer Portfolio.pdf"'


def test_docx_export(client, designer_tenant):
    response = client.get(f"/portfolio/{designer_tenant}", params={"format": "docx"})

    assert response.status_code == 200
    assert response.content.startswith(b"PK")


def test_page_renders_placeholders_when_content_is_unavailable(client, session_headers, monkeypatch):
    client.get("/api/user-profile", headers=session_headers("user-1", "jane@example.com"))

    def _fail():
        raise StoreFailure("Failed to list skills")

    monkeypatch.setattr(portfolio_service.skills, "list", _fail)
    monkeypatch.setattr(portfolio_service, "get_profile", _fail)

    response = client.get("/portfolio/jane")

    assert response.status_code == 200
    assert "Full Stack Developer" in response.text


def test_load_domain_data_tolerates_failing_collections(monkeypatch, caplog):
    def _fail():
        raise StoreFailure("Failed to list projects")

    monkeypatch.setattr(portfolio_service.projects, "list", _fail)

    with caplog.at_level("WARNING"):
        data = portfolio_service.load_domain_data()

    assert data.projects == ()
    assert data.profile is None
    assert "projects" in caplog.text


def test_templates_listing(client):
    response = client.get("/api/templates")

    assert response.status_code == 200
    templates = response.json()
    assert [template["id"] for template in templates] == ["developer", "designer", "finance", "professional"]
    assert templates[0]["displayName"] == "Developer Portfolio"
    assert templates[0]["defaultColorScheme"]["primary"] == "#3B82F6"


def test_template_lookup(client):
    assert client.get("/api/templates/finance").json()["targetRole"] == "Accountant / Finance"
    assert client.get("/api/templates/brutalist").status_code == 404


def test_template_preview_uses_placeholders_and_defaults(client):
    response = client.get("/api/templates/finance/preview")

    assert response.status_code == 200
    assert "Financial Expert" in response.text
    assert "--template-primary: #1E40AF" in response.text
    assert client.get("/api/templates/brutalist/preview").status_code == 404


def test_exports_color_headings_from_theme():
    rendered = render("developer", {"customizations": {"colorScheme": {"primary": "#112233"}}}, DomainData())

    assert hex_to_rgb(rendered.theme.primary) == (17, 34, 51)
    assert create_pdf_from_portfolio(rendered).startswith(b"%PDF")
    assert create_docx_from_portfolio(rendered).startswith(b"PK")


def test_hex_to_rgb_falls_back_on_garbage():
    assert hex_to_rgb("#abc") == (170, 187, 204)
    assert hex_to_rgb("not-a-color", fallback=(1, 2, 3)) == (1, 2, 3)
