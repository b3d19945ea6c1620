import re
from io import BytesIO
from pathlib import Path

from docx import Document
from docx.shared import Pt, RGBColor
from fpdf import FPDF

from portfolio_renderer import RenderedPortfolio, Section, SectionItem

DEFAULT_HEADING_COLOR = (47, 112, 180)


def _safe_text(value: str) -> str:
    text = value or ""
    replacements = {
        "•": "-",
        "–": "-",
        "—": "-",
        "’": "'",
        "‘": "'",
        "“": '"',
        "”": '"',
        "…": "...",
        "\u00a0": " ",
        "\u200b": "",
    }
    for old, new in replacements.items():
        text = text.replace(old, new)

    # The core PDF fonts only cover latin-1.
    text = text.encode("latin-1", errors="ignore").decode("latin-1")
    text = re.sub(r"\s+", " ", text).strip()
    # FPDF can fail when a single token is wider than the printable area.
    parts = text.split()
    normalized: list[str] = []
    for part in parts:
        if len(part) <= 45:
            normalized.append(part)
            continue
        normalized.append(" ".join(part[i : i + 45] for i in range(0, len(part), 45)))
    return " ".join(normalized)


def hex_to_rgb(value: str, fallback: tuple[int, int, int] = DEFAULT_HEADING_COLOR) -> tuple[int, int, int]:
    match = re.fullmatch(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})", (value or "").strip())
    if not match:
        return fallback
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _item_heading(item: SectionItem) -> str:
    return " at ".join(part for part in [item.title, item.subtitle] if part)


def _item_lines(item: SectionItem) -> list[str]:
    lines = []
    if item.meta:
        lines.append(item.meta)
    if item.body:
        lines.append(item.body)
    if item.tags:
        lines.append(", ".join(item.tags))
    if item.link:
        lines.append(item.link)
    return lines


def _skill_line(items: list[SectionItem]) -> list[str]:
    grouped: dict[str, list[str]] = {}
    for item in items:
        label = f"{item.title} ({item.level}%)" if item.level is not None else item.title
        grouped.setdefault(item.group, []).append(label)
    return [f"{group}: {', '.join(names)}" for group, names in grouped.items()]


def _is_grouped(section: Section) -> bool:
    return bool(section.items) and bool(section.items[0].group)


def create_pdf_from_portfolio(rendered: RenderedPortfolio, output_path: Path | None = None) -> bytes:
    heading_color = hex_to_rgb(rendered.theme.primary)

    SECTION_SPACING = 6
    ITEM_SPACING = 2

    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=12)
    pdf.add_page()
    pdf.set_title(_safe_text(rendered.seo.title))

    def draw_divider() -> None:
        y = pdf.get_y() + 1
        pdf.set_draw_color(160, 160, 160)
        pdf.set_line_width(0.4)
        pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
        pdf.ln(SECTION_SPACING)

    def write_line(text: str, h: float = 6, color: tuple[int, int, int] | None = None) -> None:
        if not text:
            return
        pdf.set_x(pdf.l_margin)
        pdf.set_text_color(*(color or (0, 0, 0)))
        pdf.multi_cell(0, h, _safe_text(text))
        pdf.set_text_color(0, 0, 0)

    hero = rendered.hero
    pdf.set_font("Helvetica", "B", 18)
    write_line(hero.name, h=10)
    pdf.set_font("Helvetica", "", 12)
    write_line(hero.role, h=7)
    pdf.set_font("Helvetica", "", 10)
    write_line(hero.location, h=6)
    write_line(hero.tagline, h=6)
    if hero.resume_url:
        write_line(f"Resume: {hero.resume_url}", h=6)
    draw_divider()

    for section in rendered.sections:
        pdf.set_font("Helvetica", "B", 12)
        write_line(section.heading, h=8, color=heading_color)
        pdf.set_font("Helvetica", "", 11)
        write_line(section.intro, h=6)

        if _is_grouped(section):
            for line in _skill_line(section.items):
                write_line(f"- {line}", h=6)
        else:
            for item in section.items:
                pdf.set_font("Helvetica", "B", 11)
                write_line(_item_heading(item), h=6, color=heading_color)
                pdf.set_font("Helvetica", "", 10)
                for line in _item_lines(item):
                    write_line(line, h=5)
                pdf.ln(ITEM_SPACING)
        draw_divider()

    pdf_bytes = bytes(pdf.output())

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(pdf_bytes)

    return pdf_bytes


def create_docx_from_portfolio(rendered: RenderedPortfolio, output_path: Path | None = None) -> bytes:
    doc = Document()
    heading_color = RGBColor(*hex_to_rgb(rendered.theme.primary))

    def _set_spacing(paragraph, before: int = 0, after: int = 6) -> None:
        paragraph.paragraph_format.space_before = Pt(before)
        paragraph.paragraph_format.space_after = Pt(after)

    def add_text(text: str, size: int = 11, bold: bool = False, colored: bool = False, after: int = 4) -> None:
        if not text:
            return
        p = doc.add_paragraph()
        run = p.add_run(_safe_text(text))
        run.bold = bold
        run.font.size = Pt(size)
        if colored:
            run.font.color.rgb = heading_color
        _set_spacing(p, before=0, after=after)

    hero = rendered.hero
    add_text(hero.name, size=16, bold=True)
    add_text(hero.role, size=12)
    add_text(hero.location, size=10)
    add_text(hero.tagline, size=10, after=8)
    if hero.resume_url:
        add_text(f"Resume: {hero.resume_url}", size=10, after=8)

    for section in rendered.sections:
        add_text(section.heading, size=13, bold=True, colored=True, after=6)
        add_text(section.intro, size=10)

        if _is_grouped(section):
            for line in _skill_line(section.items):
                add_text(f"- {line}", size=10, after=2)
            continue

        for item in section.items:
            add_text(_item_heading(item), size=11, bold=True, after=2)
            for line in _item_lines(item):
                add_text(line, size=10, after=2)

    buffer = BytesIO()
    doc.save(buffer)
    docx_bytes = buffer.getvalue()

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(docx_bytes)

    return docx_bytes
