import base64
import zipfile

import docx
import pytest
from ebooklib import epub


# 1x1 PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def sample_docx(tmp_path):
    image_path = tmp_path / "pixel.png"
    image_path.write_bytes(PNG_BYTES)

    document = docx.Document()
    document.core_properties.title = "Quarterly Report"
    document.core_properties.author = "Ada Lovelace"
    document.core_properties.language = "en"
    document.core_properties.comments = ""

    document.add_heading("Overview", level=2)
    paragraph = document.add_paragraph("Plain ")
    paragraph.add_run("bold").bold = True
    paragraph.add_run(" and ")
    paragraph.add_run("italic").italic = True

    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Name"
    table.cell(0, 1).text = "Value"
    table.cell(1, 0).text = "a"
    table.cell(1, 1).text = "1"

    document.add_picture(str(image_path))

    path = tmp_path / "report.docx"
    document.save(str(path))
    return path


@pytest.fixture
def sample_epub(tmp_path):
    book = epub.EpubBook()
    book.set_identifier("book-to-md-test")
    book.set_title("A Small Book")
    book.set_language("en")
    book.add_author("Jane Doe")
    book.add_author("John Roe")
    book.add_metadata("DC", "publisher", "Example Press")
    book.add_metadata("DC", "description", "Two short chapters.")

    intro = epub.EpubHtml(title="Intro", file_name="intro.xhtml", lang="en")
    intro.content = "<h1>Intro</h1><p>Hello <em>world</em>.</p>"

    second = epub.EpubHtml(title="Second", file_name="second.xhtml", lang="en")
    second.content = '<h2>Details</h2><p><img src="media/pixel.png" alt="Pixel"/></p>'

    image = epub.EpubItem(
        uid="pixel",
        file_name="media/pixel.png",
        media_type="image/png",
        content=PNG_BYTES,
    )

    for item in (intro, second, image):
        book.add_item(item)
    book.toc = (intro, second)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = [intro, second]

    path = tmp_path / "small.epub"
    epub.write_epub(str(path), book)
    return path


@pytest.fixture
def company_docx(sample_docx, tmp_path):
    """The sample document with a Company set in docProps/app.xml."""
    path = tmp_path / "company.docx"
    with zipfile.ZipFile(sample_docx) as source, zipfile.ZipFile(path, "w") as target:
        for info in source.infolist():
            data = source.read(info.filename)
            if info.filename == "docProps/app.xml":
                data = data.replace(b"<Company/>", b"<Company> Analytical Engines Ltd </Company>")
            target.writestr(info, data)
    return path


@pytest.fixture
def nested_epub(tmp_path):
    """An EPUB with chapters under Text/ and images under Images/."""
    book = epub.EpubBook()
    book.set_identifier("book-to-md-nested")
    book.set_title("Nested")
    book.set_language("en")

    chapter = epub.EpubHtml(title="C", file_name="Text/ch1.xhtml", lang="en")
    chapter.content = '<h1>C</h1><p><img src="../Images/fig.png" alt="Fig"/></p>'

    image = epub.EpubItem(
        uid="fig",
        file_name="Images/fig.png",
        media_type="image/png",
        content=PNG_BYTES,
    )

    book.add_item(chapter)
    book.add_item(image)
    book.toc = (chapter,)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = [chapter]

    path = tmp_path / "nested.epub"
    epub.write_epub(str(path), book)
    return path
