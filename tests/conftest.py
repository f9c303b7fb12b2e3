import json

import pytest

from featherdev.config import load_config

SHELL = """<!DOCTYPE html>
<html lang="{{localeName}}">
<head>
<title>{{package.json:name}} {{package.json: version}}</title>
<style>{{cssOutput}}</style>
</head>
<body>
<p>{{translate: greeting}}</p>
<script>{{jsOutput}}</script>
</body>
</html>
"""


@pytest.fixture
def project(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps({
        "name": "feather-wiki",
        "version": "1.8.0",
        "author": {"name": "Robbie", "url": None},
        "keywords": ["wiki", "quine"],
    }))
    locales = tmp_path / "locales"
    locales.mkdir()
    (locales / "en-US.json").write_text(json.dumps({
        "greeting": "Hello",
        "save": "Save",
    }))
    (locales / "fr-FR.json").write_text(json.dumps({
        "greeting": "Bonjour",
    }))
    (tmp_path / "index.html").write_text(SHELL)
    return tmp_path


@pytest.fixture
def config(project):
    return load_config(project, environ={})

