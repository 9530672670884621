import os
from typing import Any, Dict, List
from flask import current_app, render_template
from emusite.models.base import utc_now
from emusite.models.page import Page
from emusite.models.product import Product
from emusite.models.news import News
from emusite.models.content import Solution, Service
from emusite.models.setting import GlobalSEO
from emusite.utils.transaction import transactional
from .settings import get_or_create_seo


def _base_url() -> str:
    return current_app.config["PUBLIC_BASE_URL"].rstrip("/")


def sitemap_entries() -> List[Dict[str, Any]]:
    """
    Static routes first, then every publicly visible content row.
    Each entry: loc, lastmod, changefreq, priority.
    """
    base_url = _base_url()
    now = utc_now()

    entries = [
        {"loc": base_url, "lastmod": now, "changefreq": "daily", "priority": "1.0"},
        {"loc": f"{base_url}/about", "lastmod": now, "changefreq": "monthly", "priority": "0.8"},
        {"loc": f"{base_url}/contact", "lastmod": now, "changefreq": "monthly", "priority": "0.8"},
    ]

    sources = (
        (Page, "Published", "", "weekly", "0.7"),
        (Product, "Active", "/products", "weekly", "0.7"),
        (News, "Published", "/news", "weekly", "0.6"),
        (Solution, "Active", "/solutions", "monthly", "0.7"),
        (Service, "Active", "/services", "monthly", "0.7"),
    )

    for model, status, prefix, changefreq, priority in sources:
        rows = model.query.filter_by(status=status).order_by(model.created_at.asc()).all()
        for row in rows:
            entries.append({
                "loc": f"{base_url}{prefix}/{row.slug}",
                "lastmod": row.updated_at,
                "changefreq": changefreq,
                "priority": priority,
            })

    return entries


def render_sitemap() -> str:
    return render_template("sitemap.xml", entries=sitemap_entries())


def write_sitemap() -> str:
    """Write sitemap.xml into PUBLIC_FOLDER; returns the file path."""
    public_folder = current_app.config["PUBLIC_FOLDER"]
    os.makedirs(public_folder, exist_ok=True)

    path = os.path.join(public_folder, "sitemap.xml")
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(render_sitemap())

    current_app.logger.info("Sitemap written to %s", path)
    return path


def default_robots_txt() -> str:
    return (
        "User-agent: *\n"
        "Allow: /\n"
        "Disallow: /admin\n"
        "Disallow: /api\n"
        "\n"
        f"Sitemap: {_base_url()}/sitemap.xml\n"
    )


def robots_txt() -> str:
    """The stored robots text when there is one, else the default."""
    seo = GlobalSEO.query.order_by(GlobalSEO.created_at.asc()).first()
    if seo is not None and seo.robots_txt:
        return seo.robots_txt
    return default_robots_txt()


def generate_robots_txt() -> str:
    seo = get_or_create_seo()
    with transactional():
        seo.robots_txt = default_robots_txt()
    return seo.robots_txt
