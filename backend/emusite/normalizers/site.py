from .common import timestamps


def normalize_seo_settings(seo):
    return {
        "id": seo.id,
        "description": seo.description,
        "keywords": seo.keywords,
        "og_image": seo.og_image,
        "robots_txt": seo.robots_txt,
        "google_verification": seo.google_verification,
        "bing_verification": seo.bing_verification,
        "custom_meta_tags": seo.custom_meta_tags or [],
        **timestamps(seo),
    }


def normalize_social_media(link):
    return {
        "id": link.id,
        "platform": link.platform,
        "url": link.url,
        "icon": link.icon,
        "display_order": link.display_order,
        "is_active": link.is_active,
        "qr_code": link.qr_code,
        "has_qr_code": link.has_qr_code,
        **timestamps(link),
    }


def normalize_keyword(ranking):
    return {
        "id": ranking.id,
        "keyword": ranking.keyword,
        "position": ranking.position,
        "change": ranking.change,
    }


def normalize_competitor(analysis):
    return {
        "id": analysis.id,
        "competitor": analysis.competitor,
        "score": analysis.score,
        "strength": analysis.strength,
    }
