"""Coupons, checkout quote, products and profile over HTTP."""

from datetime import timedelta

import pytest

from storefront.extensions import db
from storefront.model import Coupon, Product
from storefront.seed_products import SEED_PRODUCTS


@pytest.fixture
def coupons(app, frozen_now):
    now = frozen_now.current()
    with app.app_context():
        db.session.add_all([
            Coupon(code="SAVE10", discount_type="percent", value=10, min_order_value=500),
            Coupon(code="FLAT100", discount_type="flat", value=100),
            Coupon(code="OLD", discount_type="flat", value=50, expiry_date=now - timedelta(days=1)),
            Coupon(code="PAUSED", discount_type="flat", value=50, is_active=False),
        ])
        db.session.commit()


def product_payload(**kw):
    data = {
        "title": "SG Test Bat", "price": 3999, "category": "Bats", "brand": "SG",
        "image": "/img/sg.jpg", "isBestSeller": True,
    }
    data.update(kw)
    return data


class TestCoupons:
    def test_apply(self, client, coupons):
        r = client.post("/api/coupons/validate", json={"code": "save10", "cartTotal": 1000})
        assert r.status_code == 200
        data = r.get_json()["data"]
        assert (data["code"], data["discountAmount"], data["finalTotal"]) == ("SAVE10", 100, 900)

    def test_bare_path_is_an_alias(self, client, coupons):
        r = client.post("/api/coupons", json={"code": "FLAT100", "cartTotal": 50})
        assert r.get_json()["data"]["discountAmount"] == 50
        assert r.get_json()["data"]["finalTotal"] == 0

    def test_minimum_not_met(self, client, coupons):
        r = client.post("/api/coupons/validate", json={"code": "SAVE10", "cartTotal": 300})
        assert r.status_code == 400
        body = r.get_json()
        assert body["data"]["minOrderValue"] == 500
        assert "500.00" in body["message"]

    @pytest.mark.parametrize("code,status", [("NOPE", 404), ("OLD", 400), ("PAUSED", 400)])
    def test_rejections(self, client, coupons, code, status):
        r = client.post("/api/coupons/validate", json={"code": code, "cartTotal": 1000})
        assert r.status_code == status
        assert r.get_json()["status"] is False

    @pytest.mark.parametrize("body", [{"cartTotal": 100}, {"code": "  ", "cartTotal": 100},
                                      {"code": "SAVE10"}, {"code": "SAVE10", "cartTotal": -1}])
    def test_bad_requests(self, client, coupons, body):
        assert client.post("/api/coupons/validate", json=body).status_code == 400

    @pytest.mark.parametrize("body", [{"code": 10, "cartTotal": 100}, ["SAVE10", 1000]])
    def test_malformed_bodies(self, client, coupons, body):
        r = client.post("/api/coupons/validate", json=body)
        assert r.status_code == 400
        assert r.get_json()["status"] is False


def test_checkout_quote(client, coupons):
    r = client.post("/api/checkout/quote", json={"items": [{"price": 1000, "quantity": 2}], "couponCode": "SAVE10"})
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["subtotal"] == 2000
    assert data["shipping"] == 150
    assert data["tax"] == 360
    assert data["discount"] == 200
    assert data["total"] == 2310


@pytest.mark.parametrize("body", [{"items": [{"price": 10}], "couponCode": 7}, [{"price": 10}]])
def test_checkout_quote_rejects_malformed_body(client, body):
    r = client.post("/api/checkout/quote", json=body)
    assert r.status_code == 400


class TestProducts:
    def test_admin_creates_product(self, client, auth_headers):
        r = client.post("/api/products", json=product_payload(), headers=auth_headers)
        assert r.status_code == 201
        product = r.get_json()["data"]
        assert product["category"] == "bats"
        assert product["brand"] == "sg"
        assert product["rating"] == 4.5
        assert r.headers["Location"].endswith(f"/api/products/{product['id']}")

    def test_regular_user_forbidden(self, client, register):
        register()
        token = register(email="ravi@example.com", name="Ravi")["token"]
        r = client.post("/api/products", json=product_payload(), headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 403
        assert r.get_json()["message"] == "Only admins can add products"

    def test_create_requires_fields(self, client, auth_headers):
        r = client.post("/api/products", json={"title": "x", "price": 1}, headers=auth_headers)
        assert r.status_code == 400
        assert set(r.get_json()["data"]["missing"]) == {"category", "brand", "image"}

    def test_get_missing(self, client):
        assert client.get("/api/products/9999").status_code == 404

    def test_filters_and_sort(self, app, client):
        app.test_cli_runner().invoke(args=["seed-products"])
        everything = client.get("/api/products").get_json()["data"]
        assert everything["total"] == len(SEED_PRODUCTS)

        bats = client.get("/api/products?category=BATS&sort=price").get_json()["data"]["items"]
        assert bats and all(p["category"] == "bats" for p in bats)
        assert [p["price"] for p in bats] == sorted(p["price"] for p in bats)

        cheap = client.get("/api/products?max_price=1000").get_json()["data"]["items"]
        assert all(p["price"] <= 1000 for p in cheap)

        best = client.get("/api/products?best_seller=true").get_json()["data"]["items"]
        assert all(p["isBestSeller"] for p in best)


class TestProfile:
    def test_get_profile(self, client, auth_headers):
        r = client.get("/api/user", headers=auth_headers)
        assert r.status_code == 200
        user = r.get_json()["data"]["user"]
        assert user["wishlist"] == [] and user["cart"] == []

    def test_put_replaces_lists(self, client, auth_headers):
        body = {
            "name": "Asha K",
            "wishlist": [{"title": "Kit Bag", "price": 2499, "image": "/img/bag.jpg"}],
            "cart": [{"productId": 3, "quantity": 2}],
            "recentlyViewed": [3, 7],
        }
        r = client.put("/api/user", json=body, headers=auth_headers)
        assert r.status_code == 200
        user = r.get_json()["data"]["user"]
        assert user["name"] == "Asha K"
        assert user["recentlyViewed"] == [3, 7]

        r = client.put("/api/user", json={"cart": []}, headers=auth_headers)
        user = r.get_json()["data"]["user"]
        assert user["cart"] == []
        assert len(user["wishlist"]) == 1

    def test_put_rejects_non_list(self, client, auth_headers):
        r = client.put("/api/user", json={"addresses": "12 MG Road"}, headers=auth_headers)
        assert r.status_code == 400

    def test_put_rejects_non_string_name(self, client, auth_headers):
        r = client.put("/api/user", json={"name": 12}, headers=auth_headers)
        assert r.status_code == 400

    def test_requires_token(self, client):
        assert client.get("/api/user").status_code == 401


class TestCommands:
    def test_create_coupon(self, app):
        runner = app.test_cli_runner()
        result = runner.invoke(args=["create-coupon", "welcome", "--type", "percent", "--value", "15"])
        assert result.exit_code == 0, result.output
        assert "WELCOME" in result.output

        again = runner.invoke(args=["create-coupon", "WELCOME", "--type", "flat", "--value", "5"])
        assert again.exit_code != 0
        with app.app_context():
            assert Coupon.query.count() == 1

    def test_create_coupon_bad_expiry(self, app):
        result = app.test_cli_runner().invoke(
            args=["create-coupon", "X", "--type", "flat", "--value", "5", "--expires", "tomorrow"])
        assert result.exit_code != 0

    def test_seed_replaces_catalog(self, app):
        runner = app.test_cli_runner()
        runner.invoke(args=["seed-products"])
        result = runner.invoke(args=["seed-products"])
        assert result.exit_code == 0
        with app.app_context():
            assert Product.query.count() == len(SEED_PRODUCTS)

    def test_export_then_import(self, app, tmp_path):
        runner = app.test_cli_runner()
        runner.invoke(args=["seed-products"])
        path = tmp_path / "products.csv"
        result = runner.invoke(args=["export-products", str(path)])
        assert result.exit_code == 0, result.output
        assert path.read_text().splitlines()[0].startswith("title,price")

        result = runner.invoke(args=["import-products", str(path)])
        assert result.exit_code == 0, result.output
        with app.app_context():
            assert Product.query.count() == 2 * len(SEED_PRODUCTS)

    def test_import_rejects_missing_columns(self, app, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("title,price\nBat,100\n")
        result = app.test_cli_runner().invoke(args=["import-products", str(path)])
        assert result.exit_code != 0
        assert "category" in result.output
