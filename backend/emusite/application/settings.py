from typing import Any, Dict, Optional
from emusite.extensions import db
from emusite.models.setting import Setting, GlobalSEO
from emusite.utils.transaction import transactional

DEFAULT_WEBSITE_SETTINGS = {
    "site_name": "",
    "site_description": "",
    "logo": "",
    "favicon": "",
}

SMTP_REQUIRED_KEYS = ("host", "port", "username", "password")


def get_setting(setting_type: str) -> Optional[Dict[str, Any]]:
    setting = Setting.query.filter_by(type=setting_type).first()
    return setting.data if setting and setting.data else None


def save_setting(setting_type: str, data: Dict[str, Any]) -> Setting:
    """Upsert the single row of `setting_type`."""
    setting = Setting.query.filter_by(type=setting_type).first()

    with transactional():
        if setting is None:
            setting = Setting(type=setting_type, data=data)
            db.session.add(setting)
        else:
            setting.data = data

    return setting


def website_settings() -> Dict[str, Any]:
    return {**DEFAULT_WEBSITE_SETTINGS, **(get_setting("website") or {})}


def smtp_status() -> Dict[str, Any]:
    smtp = get_setting("smtp")
    if not smtp:
        return {"configured": False, "message": "SMTP settings not found"}

    configured = all(smtp.get(key) for key in SMTP_REQUIRED_KEYS)
    return {
        "configured": configured,
        "message": "SMTP is configured" if configured else "SMTP configuration is incomplete",
    }


def get_or_create_seo() -> GlobalSEO:
    seo = GlobalSEO.query.order_by(GlobalSEO.created_at.asc()).first()
    if seo is not None:
        return seo

    seo = GlobalSEO(
        description="Battery emulation and test systems",
        keywords="",
        og_image="",
        robots_txt=None,
        google_verification="",
        bing_verification="",
        custom_meta_tags=[],
    )
    with transactional():
        db.session.add(seo)
    return seo
