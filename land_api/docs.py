"""
Render the API's OpenAPI document into a static documentation bundle.

Produces `swagger.json` and a Swagger UI `index.html` that embeds the
document, suitable for serving from GitHub Pages or any static host.
"""
import argparse
import json
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .core.config import settings

SWAGGER_UI_VERSION = "5.9.0"

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_index_html(document: dict) -> str:
    """Render the Swagger UI page with the document embedded via `tojson`."""
    template = _get_env().get_template("swagger.html")
    return template.render(
        title=document["info"]["title"],
        ui_version=SWAGGER_UI_VERSION,
        document=document,
    )


def build_document(api_url: Optional[str] = None) -> dict:
    """Build the OpenAPI document, optionally pointing it at a deployed backend."""
    from .main import app

    document = app.openapi()
    if api_url:
        document = {
            **document,
            "servers": [
                {"url": api_url, "description": "Production API Server"},
                *document.get("servers", []),
            ],
        }
    return document


def generate_docs(output_dir: Path, api_url: Optional[str] = None) -> tuple[Path, Path]:
    """Write index.html and swagger.json into output_dir and return their paths."""
    document = build_document(api_url)
    output_dir.mkdir(parents=True, exist_ok=True)

    html_path = output_dir / "index.html"
    html_path.write_text(render_index_html(document), encoding="utf-8")

    json_path = output_dir / "swagger.json"
    json_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    return html_path, json_path


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Generate static API documentation")
    parser.add_argument("--output-dir", default=settings.DOCS_OUTPUT_DIR, help="Where to write the docs")
    parser.add_argument("--api-url", default=None, help="Deployed backend URL to list first in servers")
    args = parser.parse_args(argv)

    output_dir = Path(args.output_dir).resolve()
    html_path, json_path = generate_docs(output_dir, args.api_url)

    print("Static documentation generated successfully!")
    print(f"Documentation files created in: {output_dir}")
    print(f"index.html: {html_path}")
    print(f"swagger.json: {json_path}")
    print("")
    print("Next steps:")
    print("1. Pass --api-url with your deployed backend URL if you have not")
    print("2. Commit the docs/ folder to your repository")
    print("3. Enable GitHub Pages to serve from the docs/ folder")


if __name__ == "__main__":
    main()
