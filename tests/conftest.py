# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

POST_XML = """<?xml version="1.0" encoding="UTF-8"?>
<type
    xmlns:sioc="http://rdfs.org/sioc/ns#"
    xmlns:dcterms="http://purl.org/dc/terms/"
    xmlns:skos="http://www.w3.org/2004/02/skos/core#"
    typeof="sioc:Post"
>
    <config key="my" value="value"/>
    <children>
        <property property="dcterms:title" identifier="title" tag-name="h2"/>
        <collection rel="skos:related" identifier="tags" tag-name="ul">
            <config key="my" value="value"/>
            <attribute key="class" value="tags"/>
        </collection>
    </children>
</type>
"""


@pytest.fixture
def write_metadata(tmp_path: Path) -> Callable[..., Path]:
    """write_metadata("Blog.Post.xml", xml, subdir="a") -> path of the written file."""

    def _write(filename: str, content: str, subdir: str = "meta") -> Path:
        d = tmp_path / subdir
        d.mkdir(parents=True, exist_ok=True)
        path = d / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def post_dir(write_metadata) -> Path:
    return write_metadata("Blog.Post.xml", POST_XML).parent
