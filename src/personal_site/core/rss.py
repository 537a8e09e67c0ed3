"""
RSS 2.0 serialization of feed items.
"""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable
from urllib.parse import quote, urljoin

from personal_site.models import FeedItem, SiteMetadata


def absolute_url(site: str, link: str) -> str:
    """Resolve a site-relative item link against the site base URL.

    Characters that are not allowed in a URL path are percent-encoded.
    """
    return urljoin(site, quote(link, safe="/"))


def format_rfc822(value: datetime) -> str:
    """Format a publish date as an RFC-822 date string in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc))


def build_rss_element(site: SiteMetadata, items: Iterable[FeedItem]) -> ET.Element:
    """Build the ``<rss>`` element tree for a channel and its items.

    Items are written in the order given.
    """
    rss = ET.Element("rss", version="2.0")

    channel = ET.SubElement(rss, "channel")
    ET.SubElement(channel, "title").text = site.title
    ET.SubElement(channel, "description").text = site.description
    ET.SubElement(channel, "link").text = site.site

    for feed_item in items:
        url = absolute_url(site.site, feed_item.link)

        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = feed_item.title
        ET.SubElement(item, "description").text = feed_item.description
        ET.SubElement(item, "pubDate").text = format_rfc822(feed_item.publish_date)
        ET.SubElement(item, "link").text = url
        ET.SubElement(item, "guid", isPermaLink="true").text = url

    return rss


def render_rss(site: SiteMetadata, items: Iterable[FeedItem]) -> bytes:
    """Serialize a channel and its items to an RSS 2.0 document.

    Returns:
        UTF-8 encoded XML with declaration
    """
    rss = build_rss_element(site, items)
    ET.indent(rss, space="  ")
    return ET.tostring(rss, encoding="utf-8", xml_declaration=True)
