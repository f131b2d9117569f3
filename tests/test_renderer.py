from bs4 import BeautifulSoup

from renderer import render_tag_cloud, write_tag_cloud
from wordcount import Entry

SELECTION = [Entry("apple", 2), Entry("banana", 3)]
FONTS = {"apple": 11, "banana": 48}


def parse(page):
    return BeautifulSoup(page, "lxml")


def test_page_starts_with_doctype():
    page = render_tag_cloud("fruit.txt", 2, SELECTION, FONTS)
    assert page.startswith("<!DOCTYPE html>")


def test_title_and_heading_name_the_input():
    soup = parse(render_tag_cloud("fruit.txt", 2, SELECTION, FONTS))
    assert soup.title.string == "Top 2 words in fruit.txt"
    assert soup.h2.string == "Top 2 words in fruit.txt"
    assert soup.hr is not None


def test_stylesheets_are_linked_in_order():
    soup = parse(render_tag_cloud(
        "fruit.txt", 2, SELECTION, FONTS, stylesheets=("a.css", "b.css")))
    links = soup.head.find_all("link")
    assert [link["href"] for link in links] == ["a.css", "b.css"]
    assert all(link["rel"] == ["stylesheet"] for link in links)
    assert all(link["type"] == "text/css" for link in links)


def test_default_stylesheets_include_local_css():
    soup = parse(render_tag_cloud("fruit.txt", 2, SELECTION, FONTS))
    hrefs = [link["href"] for link in soup.head.find_all("link")]
    assert len(hrefs) == 2
    assert hrefs[-1] == "tagcloud.css"


def test_one_span_per_word_in_selection_order():
    soup = parse(render_tag_cloud("fruit.txt", 2, SELECTION, FONTS))
    cbox = soup.find("div", class_="cdiv").find("p", class_="cbox")
    spans = cbox.find_all("span")
    assert [span.string for span in spans] == ["apple", "banana"]
    assert [span["class"] for span in spans] == [["f11"], ["f48"]]
    assert [span["title"] for span in spans] == ["count: 2", "count: 3"]
    assert all(span["style"] == "cursor:default" for span in spans)


def test_markup_in_words_is_escaped():
    page = render_tag_cloud("x.txt", 1, [Entry("<b>&", 1)], {"<b>&": 48})
    assert "<b>&" not in page
    assert parse(page).find("span").string == "<b>&"


def test_empty_selection_renders_empty_cloud():
    soup = parse(render_tag_cloud("empty.txt", 0, [], {}))
    assert soup.title.string == "Top 0 words in empty.txt"
    assert soup.find("p", class_="cbox").find_all("span") == []


def test_write_tag_cloud_writes_page(tmp_path):
    output = tmp_path / "cloud.html"
    page = write_tag_cloud(output, "fruit.txt", 2, SELECTION, FONTS)
    assert output.read_text(encoding="utf-8") == page
