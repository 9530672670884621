from .common import iso, timestamps


def normalize_news(news):
    return {
        "id": news.id,
        "title": news.title,
        "slug": news.slug,
        "category": news.category,
        "status": news.status,
        "publish_date": iso(news.publish_date),
        "content": news.content,
        "excerpt": news.excerpt,
        "cover_image": news.cover_image,
        "attachments": news.attachments or [],
        **timestamps(news),
    }
