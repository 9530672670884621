from .common import timestamps


def normalize_contact_form(form):
    return {
        "id": form.id,
        "first_name": form.first_name,
        "last_name": form.last_name,
        "email": form.email,
        "phone": form.phone,
        "company": form.company,
        "subject": form.subject,
        "message": form.message,
        "attachments": form.attachments or [],
        "status": form.status,
        "notes": form.notes,
        **timestamps(form),
    }


def normalize_notification(config):
    return {
        "id": config.id,
        "name": config.name,
        "type": config.type,
        "description": config.description,
        "emails": config.emails or [],
        "enabled": config.enabled,
        **timestamps(config),
    }


def normalize_contact_setting(setting):
    return {
        "id": setting.id,
        "type": setting.type,
        "data": setting.data or {},
        **timestamps(setting),
    }


def normalize_office(office):
    return {
        "id": office.id,
        "name": office.name,
        "location": office.location,
        "address": office.address,
        "status": office.status,
        **timestamps(office),
    }
