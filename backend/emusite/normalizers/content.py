from .common import iso, timestamps


def _content_fields(row):
    return {
        "id": row.id,
        "title": row.title,
        "slug": row.slug,
        "category": row.category,
        "status": row.status,
        "content": row.content,
        **timestamps(row),
    }


def normalize_solution(solution):
    return {
        **_content_fields(solution),
        "description": solution.description,
        "cover_image": solution.cover_image,
        "gallery": solution.gallery or [],
        "features": solution.features or [],
    }


def normalize_service(service):
    return {
        **_content_fields(service),
        "description": service.description,
        "icon": service.icon,
        "features": service.features or [],
    }


def normalize_support(article):
    return {
        **_content_fields(article),
        "attachments": article.attachments or [],
    }


def normalize_faq(faq):
    return {
        "id": faq.id,
        "question": faq.question,
        "answer": faq.answer,
        "category": faq.category,
        "order": faq.order,
        "status": faq.status,
        **timestamps(faq),
    }


def normalize_section(section):
    return {
        "id": section.id,
        "name": section.name,
        "title": section.title,
        "description": section.description,
        "status": section.status,
        "badge": section.badge,
        "actions": section.actions or [],
        "media": section.media,
        "features": section.features or [],
        "map_points": section.map_points or [],
        "feature_title": section.feature_title,
        "feature_subtitle": section.feature_subtitle,
        "map_title": section.map_title,
        "map_subtitle": section.map_subtitle,
        "thumbnail": section.thumbnail,
        **timestamps(section),
    }


def normalize_legal(document):
    return {
        "id": document.id,
        "title": document.title,
        "slug": document.slug,
        "type": document.type,
        "content": document.content,
        "version": document.version,
        "effective_date": iso(document.effective_date),
        "status": document.status,
        **timestamps(document),
    }


def normalize_download(download):
    return {
        "id": download.id,
        "title": download.title,
        "description": download.description,
        "category": download.category,
        "version": download.version,
        "file_url": download.file_url,
        "file_size": download.file_size,
        "file_type": download.file_type,
        "thumbnail": download.thumbnail,
        "featured": download.featured,
        "status": download.status,
        "downloads": download.downloads,
        **timestamps(download),
    }
