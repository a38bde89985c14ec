"""
List response helpers: every collection endpoint returns {data, meta:{total, page, limit}}.
"""
from flask import jsonify


def paginate_query(query, page, limit):
    """Return (items, total) for one page of a SQLAlchemy query."""
    total = query.order_by(None).count()
    items = query.limit(limit).offset((page - 1) * limit).all()
    return items, total


def list_response(items, total=None, page=1, limit=None, serialize=None):
    serialize = serialize or (lambda item: item.to_dict())
    data = [serialize(item) for item in items]
    return jsonify({
        'data': data,
        'meta': {
            'total': len(data) if total is None else total,
            'page': page,
            'limit': len(data) if limit is None else limit,
        },
    })
