# pastebin/markdown/postprocessors/code_language.py
"""
Postprocessor that tags fenced code blocks for Prism.

Pandoc (with highlighting disabled) writes the fence language on the <pre>:

    <pre class="python"><code>print(1)</code></pre>

Prism's autoloader looks for a ``language-*`` class on the code element:

    <pre><code class="language-python">print(1)</code></pre>
"""

from bs4 import BeautifulSoup

# Classes Pandoc may add next to the language
_PANDOC_CLASSES = {"sourceCode", "numberLines"}


def code_language_classes(soup: BeautifulSoup, context: dict) -> None:
    for pre in soup.find_all("pre"):
        code = pre.find("code", recursive=False)
        if code is None:
            continue

        languages = [c for c in pre.get("class", []) if c not in _PANDOC_CLASSES]
        if not languages:
            continue

        existing = [c for c in code.get("class", []) if not c.startswith("language-")]
        code["class"] = [f"language-{languages[0]}"] + existing
        del pre["class"]
