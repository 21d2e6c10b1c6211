"""
Shared fixtures: a restaurant website project as the workbench sees it.
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sitecraft.core.config import reset_settings
from sitecraft.models.files import FileEntry, FolderEntry


RESTAURANT_PATHS = [
    "/home/project/src/pages/Home.tsx",
    "/home/project/src/pages/About.tsx",
    "/home/project/src/components/Hero.tsx",
    "/home/project/src/components/Menu.tsx",
    "/home/project/src/components/MenuPreview.tsx",
    "/home/project/src/components/Layout.tsx",
    "/home/project/src/components/Footer.tsx",
    "/home/project/src/components/Navbar.tsx",
    "/home/project/src/components/Gallery.tsx",
    "/home/project/src/components/Contact.tsx",
    "/home/project/src/components/Feature.tsx",
    "/home/project/src/components/Button.tsx",
    "/home/project/src/App.tsx",
    "/home/project/src/main.tsx",
    "/home/project/src/index.css",
    "/home/project/src/styles/theme.css",
    "/home/project/src/data/menu.json",
    "/home/project/src/data/info.json",
    "/home/project/tailwind.config.js",
    "/home/project/vite.config.ts",
]


def _file(content: str, binary: bool = False) -> FileEntry:
    return FileEntry(content=content, is_binary=binary)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings, whatever the host env says."""
    for var in ("SITECRAFT_PROJECT_ROOT", "SITECRAFT_MAX_CONTEXT_FILES", "SITECRAFT_EXTRA_IGNORE"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def all_files():
    return list(RESTAURANT_PATHS)


@pytest.fixture
def file_map():
    """Restaurant project FileMap, including paths that must be ignored."""
    return {
        "/home/project/src": FolderEntry(),
        "/home/project/src/pages/Home.tsx": _file("export const Home = () => <div>Home Page</div>;"),
        "/home/project/src/pages/About.tsx": _file("export const About = () => <div>About Page</div>;"),
        "/home/project/src/components/Hero.tsx": _file(
            '<section className="hero"><h1>Welcome to Our Restaurant</h1><p>The best food in town</p></section>'
        ),
        "/home/project/src/components/Menu.tsx": _file(
            "{items.map(item => <div>{item.name}: $14.99</div>)}"
        ),
        "/home/project/src/components/Layout.tsx": _file(
            "export const Layout = ({ children }) => <main>{children}</main>;"
        ),
        "/home/project/src/components/Footer.tsx": _file(
            "export const Footer = () => <footer>Open 9am-10pm Daily</footer>;"
        ),
        "/home/project/src/App.tsx": _file("export const App = () => <div>App</div>;"),
        "/home/project/src/main.tsx": _file('import React from "react"; ReactDOM.render(<App />, root);'),
        "/home/project/src/index.css": _file(".hero { background: #21C6FF; }\n.primary { color: #FF5733; }"),
        "/home/project/src/styles/theme.css": _file(":root { --primary: #333; }"),
        "/home/project/src/data/menu.json": _file(json.dumps({
            "items": [
                {"name": "Burger", "price": "$14.99"},
                {"name": "Pizza", "price": "$16.50"},
            ],
        })),
        "/home/project/src/data/info.json": _file(json.dumps({"name": "Restaurant", "hours": "9am-10pm"})),
        "/home/project/public/logo.png": _file("$14.99", binary=True),
        # Ignored paths are never scored
        "/home/project/node_modules/react/index.js": _file("module.exports = React;"),
        "/home/project/.git/config": _file("[core]"),
    }
