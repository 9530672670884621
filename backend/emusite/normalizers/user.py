from .common import timestamps


def normalize_user(user):
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "status": user.status,
        **timestamps(user),
    }
