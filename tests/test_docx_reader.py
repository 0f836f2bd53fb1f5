from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls

from book_to_md.processing.docx_reader import (
    DocxReader,
    parse_body,
    parse_numbering,
    parse_paragraph,
    parse_table,
)
from book_to_md.processing.models import (
    Container,
    Hyperlink,
    LineBreak,
    Media,
    NumberFormat,
    NumberingReference,
    Paragraph,
    Run,
    Tab,
    Table,
    TextSegment,
)


def xml(body, *prefixes):
    return parse_xml(body.replace("NS", nsdecls(*(prefixes or ("w", "r")))))


def test_parse_paragraph_style_and_numbering():
    p = xml(
        '<w:p NS>'
        '<w:pPr><w:pStyle w:val="Heading2"/>'
        '<w:numPr><w:ilvl w:val="1"/><w:numId w:val="4"/></w:numPr></w:pPr>'
        '<w:r><w:t>Scope</w:t></w:r>'
        '</w:p>'
    )
    paragraph = parse_paragraph(p)

    assert paragraph.style_id == "Heading2"
    assert paragraph.numbering == NumberingReference(list_id=4, level=1)
    assert paragraph.content == [Run(segments=[TextSegment("Scope")])]


def test_parse_paragraph_ignores_incomplete_numbering():
    p = xml('<w:p NS><w:pPr><w:numPr><w:numId w:val="4"/></w:numPr></w:pPr></w:p>')
    assert parse_paragraph(p).numbering is None

    p = xml('<w:p NS><w:pPr><w:numPr><w:ilvl w:val="x"/><w:numId w:val="4"/></w:numPr></w:pPr></w:p>')
    assert parse_paragraph(p).numbering is None


def test_parse_run_formatting_and_segments():
    p = xml(
        '<w:p NS><w:r>'
        '<w:rPr><w:b/><w:i w:val="false"/><w:dstrike/></w:rPr>'
        '<w:t xml:space="preserve">a </w:t><w:br/><w:t>b</w:t><w:tab/><w:t>c</w:t>'
        '</w:r></w:p>'
    )
    run = parse_paragraph(p).content[0]

    assert run.bold is True
    assert run.italic is False
    assert run.strike is True
    assert run.segments == [
        TextSegment("a "),
        LineBreak(),
        TextSegment("b"),
        Tab(),
        TextSegment("c"),
    ]


def test_parse_hyperlinks():
    p = xml(
        '<w:p NS>'
        '<w:hyperlink r:id="rId7"><w:r><w:rPr><w:b/></w:rPr><w:t>ex</w:t></w:r>'
        '<w:r><w:t>ample</w:t></w:r></w:hyperlink>'
        '<w:hyperlink w:anchor="_Toc1"/>'
        '</w:p>'
    )
    first, second = parse_paragraph(p).content

    assert first == Hyperlink(
        run=Run(segments=[TextSegment("ex"), TextSegment("ample")]),
        relationship_id="rId7",
    )
    assert second == Hyperlink(anchor="_Toc1")


def test_parse_drawing():
    p = xml(
        '<w:p NS><w:r><w:drawing>'
        '<wp:inline><wp:docPr id="1" name="Picture 1" descr="A chart"/>'
        '<a:graphic><a:graphicData><pic:pic><pic:blipFill>'
        '<a:blip r:embed="rId9"/>'
        '</pic:blipFill></pic:pic></a:graphicData></a:graphic>'
        '</wp:inline>'
        '</w:drawing></w:r></w:p>',
        "w", "r", "wp", "a", "pic",
    )
    run = parse_paragraph(p).content[0]
    assert run.segments == [Media(embed_id="rId9", alt_text="A chart")]


def test_parse_table_cells():
    tbl = xml(
        '<w:tbl NS>'
        '<w:tr><w:tc><w:p><w:r><w:t>A</w:t></w:r></w:p><w:p><w:r><w:t>A2</w:t></w:r></w:p></w:tc>'
        '<w:tc><w:p><w:r><w:t>B</w:t></w:r></w:p></w:tc></w:tr>'
        '<w:tr><w:tc><w:p/></w:tc></w:tr>'
        '</w:tbl>'
    )
    table = parse_table(tbl)

    assert [len(row.cells) for row in table.rows] == [2, 1]
    assert len(table.rows[0].cells[0].paragraphs) == 2


def test_parse_body_expands_sdt_and_skips_section_properties():
    body = xml(
        '<w:body NS>'
        '<w:p><w:r><w:t>one</w:t></w:r></w:p>'
        '<w:sdt><w:sdtPr/><w:sdtContent>'
        '<w:p><w:r><w:t>two</w:t></w:r></w:p>'
        '<w:tbl><w:tr><w:tc><w:p/></w:tc></w:tr></w:tbl>'
        '</w:sdtContent></w:sdt>'
        '<w:sectPr/>'
        '</w:body>'
    )
    root = parse_body(body)

    assert isinstance(root, Container)
    assert len(root.children) == 2
    assert isinstance(root.children[0], Paragraph)
    sdt = root.children[1]
    assert isinstance(sdt, Container)
    assert isinstance(sdt.children[0], Paragraph)
    assert isinstance(sdt.children[1], Table)


def test_parse_numbering_definitions():
    numbering = xml(
        '<w:numbering NS>'
        '<w:abstractNum w:abstractNumId="0">'
        '<w:lvl w:ilvl="0"><w:numFmt w:val="bullet"/></w:lvl>'
        '<w:lvl w:ilvl="1"><w:numFmt w:val="lowerRoman"/></w:lvl>'
        '<w:lvl w:ilvl="2"><w:numFmt w:val="chineseCounting"/></w:lvl>'
        '</w:abstractNum>'
        '<w:abstractNum w:abstractNumId="1">'
        '<w:lvl w:ilvl="0"><w:numFmt w:val="decimal"/></w:lvl>'
        '</w:abstractNum>'
        '<w:num w:numId="1"><w:abstractNumId w:val="0"/></w:num>'
        '<w:num w:numId="2"><w:abstractNumId w:val="1"/></w:num>'
        '<w:num w:numId="3"><w:abstractNumId w:val="5"/></w:num>'
        '</w:numbering>'
    )
    definitions = parse_numbering(numbering)

    assert definitions.format_for(1, 0) is NumberFormat.BULLET
    assert definitions.format_for(1, 1) is NumberFormat.LOWER_ROMAN
    assert definitions.format_for(1, 2) is None
    assert definitions.format_for(2, 0) is NumberFormat.DECIMAL
    assert definitions.format_for(3, 0) is None
    assert definitions.format_for(9, 0) is None


def test_docx_reader_renders_document(sample_docx):
    reader = DocxReader(sample_docx)
    images = reader.images()
    image_map = {image.original_href: f"images/{image.original_href.rsplit('/', 1)[-1]}" for image in images}

    chapters = reader.chapters(image_map)

    assert len(chapters) == 1
    content = chapters[0].content
    assert content.startswith("## Overview\n\nPlain **bold** and *italic*\n\n")
    assert "| Name | Value |\n| --- | --- |\n| a | 1 |\n" in content
    assert "![](images/image1.png)" in content
    assert content.endswith("\n") and not content.endswith("\n\n")


def test_docx_reader_images_and_metadata(sample_docx, png_bytes):
    reader = DocxReader(sample_docx)

    images = reader.images()
    assert [image.original_href for image in images] == ["word/media/image1.png"]
    assert images[0].data == png_bytes

    metadata = reader.metadata()
    assert metadata.title == "Quarterly Report"
    assert metadata.authors == ["Ada Lovelace"]
    assert metadata.language == "en"
    assert metadata.description is None
    assert metadata.publisher is None
    assert metadata.source_file == str(sample_docx)


def test_docx_reader_validate_path(sample_docx, tmp_path):
    assert DocxReader.validate_path(sample_docx)
    assert not DocxReader.validate_path(tmp_path / "missing.docx")
    assert not DocxReader.validate_path(tmp_path / "pixel.png")


def test_docx_reader_publisher_from_company(company_docx):
    metadata = DocxReader(company_docx).metadata()

    assert metadata.publisher == "Analytical Engines Ltd"
    assert metadata.title == "Quarterly Report"
