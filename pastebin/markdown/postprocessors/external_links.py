def external_link_rel(soup, context):
    """
    Mark links leaving the site as untrusted.

    Adds rel="nofollow noopener noreferrer" to http(s) links; fragment and
    relative links (footnotes, heading anchors) are left alone.
    """
    for link in soup.find_all("a", href=True):
        if link["href"].startswith(("http://", "https://")):
            link["rel"] = ["nofollow", "noopener", "noreferrer"]
