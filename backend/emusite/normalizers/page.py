from .common import timestamps


def normalize_page(page):
    return {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "status": page.status,
        "content": page.content or "",
        "hero": page.hero,
        "seo": page.seo or {},
        **timestamps(page),
    }
