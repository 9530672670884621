from sqlalchemy import or_


def search_filter(model, term, *fields):
    """Case-insensitive substring match over any of `fields`."""
    pattern = f"%{term}%"
    return or_(*[getattr(model, field).ilike(pattern) for field in fields])


def arg_flag(args, name):
    return args.get(name, "").lower() in ("1", "true", "yes")
