"""package.json for a generated project.

Versions are pinned as caret ranges; nothing is looked up in a registry.
"""

import json
from typing import Any

from create_joji_app.generator.options import ProjectOptions

DEPENDENCIES = {
    "react": "^18.3.1",
    "react-dom": "^18.3.1",
}

ROUTER_DEPENDENCIES = {
    "react-router-dom": "^6.26.0",
}

DEV_DEPENDENCIES = {
    "@vitejs/plugin-react": "^4.3.1",
    "autoprefixer": "^10.4.20",
    "postcss": "^8.4.41",
    "tailwindcss": "^3.4.10",
    "vite": "^5.4.1",
}

SCRIPTS = {
    "dev": "vite",
    "build": "vite build",
    "preview": "vite preview",
}


def build_package_json(options: ProjectOptions) -> dict[str, Any]:
    """Build the manifest dict; key order is the order written to disk."""
    dependencies = dict(DEPENDENCIES)
    if options.use_router:
        dependencies.update(ROUTER_DEPENDENCIES)

    return {
        "name": options.name,
        "private": True,
        "version": "0.1.0",
        "type": "module",
        "scripts": dict(SCRIPTS),
        "dependencies": dependencies,
        "devDependencies": dict(DEV_DEPENDENCIES),
    }


def render_package_json(options: ProjectOptions) -> str:
    return json.dumps(build_package_json(options), indent=2) + "\n"
