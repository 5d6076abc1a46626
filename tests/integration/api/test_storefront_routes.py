"""Integration tests for the storefront pages."""

from tests.conftest import APPLES_ID, FRUITS_ID


def test_home_lists_featured_and_best_sellers(client):
    response = client.get("/")

    assert response.status_code == 200
    featured, best_sellers = response.text.split('id="best-sellers"')
    assert "Heirloom Carrots" in featured
    assert "Apples" in best_sellers
    assert 'data-ai-hint="red apples"' in best_sellers


def test_home_survives_backend_failure(client, backend):
    backend.fail_table("products")
    backend.fail_table("categories")

    response = client.get("/")

    assert response.status_code == 200
    assert "No featured products yet." in response.text
    assert "No best sellers yet." in response.text


def test_layout_navigation(client):
    response = client.get("/", headers={"Authorization": "Bearer valid-token"})

    assert f'href="/categories/{FRUITS_ID}"' in response.text
    assert "Signed in as shopper@example.com" in response.text


def test_anonymous_visitor_is_not_signed_in(client):
    response = client.get("/")

    assert "Not signed in" in response.text
    assert "Signed in as" not in response.text


def test_product_detail_gallery(client):
    response = client.get(f"/products/{APPLES_ID}")

    assert response.status_code == 200
    body = response.text
    assert 'src="https://cdn.example.com/a1.png"' in body
    assert 'src="https://cdn.example.com/a2.png"' in body
    assert "Honeycrisp apples from local orchards." in body
    assert 'class="category">Fruits<' in body
    assert "Best Seller" in body


def test_missing_product_is_404(client):
    response = client.get("/products/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404


def test_category_page(client):
    response = client.get(f"/categories/{FRUITS_ID}")

    assert response.status_code == 200
    assert "Apples" in response.text
    assert "Heirloom Carrots" not in response.text


def test_missing_category_is_404(client):
    response = client.get("/categories/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "verdant-market"}
