"""
renderer.py - Tag Cloud HTML Output

Turns the alphabetically ordered selection and its font-size classes
into an HTML page. The page links the tag cloud stylesheets, which
define one CSS class per font size (f11 .. f48).

The document is assembled as a BeautifulSoup tree, so words containing
markup characters come out escaped.
"""

from bs4 import BeautifulSoup, Doctype

from utils.config import DEFAULT_STYLESHEETS

PARSER = "lxml"


def _append_line(parent, child):
    """Append child followed by a newline so each element sits on its own line."""
    parent.append(child)
    parent.append("\n")
    return child


def _heading(name, num):
    return f"Top {num} words in {name}"


def build_document(name, num, selection, fonts, stylesheets=DEFAULT_STYLESHEETS):
    """
    Build the tag cloud page as a BeautifulSoup document.

    Args:
        name: input file name shown in the title and heading
        num: number of words in the cloud
        selection: (word, count) entries in display order
        fonts: word -> font-size class for every word in selection
        stylesheets: stylesheet hrefs linked from the head
    """
    soup = BeautifulSoup("", PARSER)
    _append_line(soup, Doctype("html"))

    html = _append_line(soup, soup.new_tag("html"))
    html.append("\n")

    head = _append_line(html, soup.new_tag("head"))
    head.append("\n")
    title = _append_line(head, soup.new_tag("title"))
    title.string = _heading(name, num)
    for href in stylesheets:
        _append_line(head, soup.new_tag(
            "link", attrs={"href": href, "rel": "stylesheet", "type": "text/css"}))

    body = _append_line(html, soup.new_tag("body"))
    body.append("\n")
    h2 = _append_line(body, soup.new_tag("h2"))
    h2.string = _heading(name, num)
    _append_line(body, soup.new_tag("hr"))

    div = _append_line(body, soup.new_tag("div", attrs={"class": "cdiv"}))
    div.append("\n")
    cbox = _append_line(div, soup.new_tag("p", attrs={"class": "cbox"}))
    cbox.append("\n")
    for word, count in selection:
        span = soup.new_tag("span", attrs={
            "style": "cursor:default",
            "class": f"f{fonts[word]}",
            "title": f"count: {count}",
        })
        span.string = word
        _append_line(cbox, span)

    return soup


def render_tag_cloud(name, num, selection, fonts, stylesheets=DEFAULT_STYLESHEETS):
    """Return the tag cloud page as an HTML string."""
    return str(build_document(name, num, selection, fonts, stylesheets))


def write_tag_cloud(output_path, name, num, selection, fonts,
                    stylesheets=DEFAULT_STYLESHEETS, encoding="utf-8"):
    """Render the tag cloud page and write it to output_path."""
    page = render_tag_cloud(name, num, selection, fonts, stylesheets)
    with open(output_path, "w", encoding=encoding) as f:
        f.write(page)
    return page
