from flask import request, jsonify, url_for
from sqlalchemy import or_, desc, asc

from . import bp
from ..errors import NotFound, ValidationFailure
from ..extensions import db
from ..model import Product
from ..utils.api import api_ok
from ..utils.decorators import role_required
from ..utils.parse import parse_bool, parse_opt_float, require_amount, require_fields


# ---------- helpers ----------
def ok(message: str, data=None, status_code=200):
    resp = jsonify(api_ok(message, data))
    resp.status_code = status_code
    return resp


def _sort_products(query, sort):
    sort = (sort or "").strip()
    mapping = {
        "price": asc(Product.price), "-price": desc(Product.price),
        "rating": asc(Product.rating), "-rating": desc(Product.rating),
        "title": asc(Product.title), "-title": desc(Product.title),
    }
    col = mapping.get(sort, desc(Product.id))  # default newest first (id desc)
    return query.order_by(col)


def product_from_payload(data: dict) -> Product:
    require_fields(data, "title", "category", "brand", "image")
    rating = parse_opt_float(data.get("rating"))
    return Product(
        title=str(data["title"]).strip(),
        price=require_amount(data, "price"),
        original_price=parse_opt_float(data.get("originalPrice")),
        category=str(data["category"]).strip().lower(),
        brand=str(data["brand"]).strip().lower(),
        image=data["image"],
        rating=4.5 if rating is None else rating,
        reviews=int(parse_opt_float(data.get("reviews")) or 0),
        description=data.get("description"),
        is_new_arrival=parse_bool(data.get("isNewArrival")),
        is_best_seller=parse_bool(data.get("isBestSeller")),
    )


# ---------- routes ----------
# GET /api/products
@bp.get("")
def list_products():
    """
    Query params:
      q            -> substring match on title/brand/description
      category     -> exact category, e.g. "bats"
      brand        -> exact brand, e.g. "sg"
      min_price    -> float
      max_price    -> float
      new_arrival  -> bool
      best_seller  -> bool
      sort         -> price, -price, rating, -rating, title, -title
    """
    q = (request.args.get("q") or "").strip()
    category = (request.args.get("category") or "").strip().lower()
    brand = (request.args.get("brand") or "").strip().lower()
    min_price = parse_opt_float(request.args.get("min_price"))
    max_price = parse_opt_float(request.args.get("max_price"))

    query = Product.query

    if q:
        like = f"%{q}%"
        query = query.filter(
            or_(
                Product.title.ilike(like),
                Product.brand.ilike(like),
                Product.description.ilike(like),
            )
        )
    if category:
        query = query.filter(Product.category == category)
    if brand:
        query = query.filter(Product.brand == brand)

    # price range
    if min_price is not None:
        query = query.filter(Product.price >= min_price)
    if max_price is not None:
        query = query.filter(Product.price <= max_price)

    if request.args.get("new_arrival") is not None:
        query = query.filter(Product.is_new_arrival == parse_bool(request.args.get("new_arrival")))
    if request.args.get("best_seller") is not None:
        query = query.filter(Product.is_best_seller == parse_bool(request.args.get("best_seller")))

    items = [p.as_api() for p in _sort_products(query, request.args.get("sort")).all()]
    return ok("Products fetched", {"items": items, "total": len(items)})


# GET /api/products/<id>
@bp.get("/<int:pid>")
def get_product(pid):
    product = db.session.get(Product, pid)
    if not product:
        raise NotFound("Product not found")
    return ok("Product fetched", product.as_api())


# POST /api/products
@bp.post("")
@role_required("admin", message="Only admins can add products")
def create_product():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationFailure("JSON body required")
    product = product_from_payload(data)
    db.session.add(product)
    db.session.commit()

    resp = ok("Product created", product.as_api(), status_code=201)
    resp.headers["Location"] = url_for("products.get_product", pid=product.id, _external=True)
    return resp
