# src/sitescore/accessibility.py
# Counts behind the image alt text, link text and form label checks.

from bs4 import BeautifulSoup

from sitescore.models import AccessibilitySignals


def check_accessibility(soup: BeautifulSoup) -> AccessibilitySignals:
    """
    Collects accessibility counts from the given BeautifulSoup object.

    Every <a> element counts towards the link total, with or without an href.
    """
    images = soup.find_all("img")
    links = soup.find_all("a")
    forms = soup.find_all("form")

    return AccessibilitySignals(
        total_images=len(images),
        images_with_alt=sum(1 for img in images if img.get("alt")),
        total_links=len(links),
        links_with_text=sum(1 for link in links if link.get_text().strip()),
        total_forms=len(forms),
        forms_with_labels=sum(1 for form in forms if form.find("label") is not None),
    )
