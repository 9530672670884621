def iso(value):
    return value.isoformat() if value is not None else None


def timestamps(row):
    return {
        "created_at": iso(row.created_at),
        "updated_at": iso(row.updated_at),
    }
