import pytest

MONTH_ENDPOINTS = ["/transactions", "/statistics", "/bar-chart", "/pie-chart", "/combined-response"]


@pytest.mark.parametrize("path", MONTH_ENDPOINTS)
def test_invalid_month_rejected_everywhere(client, path):
    r = client.get(path, params={"month": "notamonth"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_statistics_sums_sold_items(client, add_product):
    add_product(1, price=100, sold=1)
    add_product(2, price=50, sold=0)
    add_product(3, price=999, sold=1, dateOfSale="2021-06-01T10:00:00+05:30")

    r = client.get("/statistics", params={"month": "march"})
    assert r.status_code == 200
    assert r.json() == {
        "selectedMonth": "march",
        "totalSaleAmount": 100,
        "totalSoldItems": 1,
        "totalNotSoldItems": 1,
    }


def test_statistics_floors_total_and_echoes_month(client, add_product):
    add_product(1, price=10.75, sold=1)
    add_product(2, price=5.5, sold=1)

    body = client.get("/statistics", params={"month": "March"}).json()
    assert body["selectedMonth"] == "March"
    assert body["totalSaleAmount"] == 16
    assert body["totalSoldItems"] == 2


def test_statistics_for_empty_month_is_zero(client, add_product):
    add_product(1, price=100, sold=1)

    r = client.get("/statistics", params={"month": "december"})
    assert r.status_code == 200
    assert r.json() == {
        "selectedMonth": "december",
        "totalSaleAmount": 0,
        "totalSoldItems": 0,
        "totalNotSoldItems": 0,
    }


def test_statistics_without_row_is_not_found(client, store, monkeypatch):
    monkeypatch.setattr(store, "fetch_one", lambda sql, params=(): None)

    r = client.get("/statistics")
    assert r.status_code == 404
    assert r.json() == {"error": "No data found for the selected month."}


def test_bar_chart_bucket_edges(client, add_product):
    add_product(1, price=0)
    add_product(2, price=900)
    add_product(3, price=901)
    add_product(4, price=100.5)
    add_product(5, price=1500)

    r = client.get("/bar-chart")
    assert r.status_code == 200
    assert r.json() == [
        {"priceRange": "0 - 100", "itemCount": 1},
        {"priceRange": "101 - 200", "itemCount": 1},
        {"priceRange": "801 - 900", "itemCount": 1},
        {"priceRange": "901-above", "itemCount": 2},
    ]


def test_bar_chart_counts_only_selected_month(client, add_product):
    add_product(1, price=150)
    add_product(2, price=160)
    add_product(3, price=170, dateOfSale="2021-09-09T10:00:00+05:30")

    assert client.get("/bar-chart", params={"month": "march"}).json() == [
        {"priceRange": "101 - 200", "itemCount": 2}
    ]
    assert client.get("/bar-chart", params={"month": "october"}).json() == []


def test_bar_chart_skips_negative_prices(client, add_product):
    add_product(1, price=-5)

    assert client.get("/bar-chart").json() == []


def test_pie_chart_counts_per_category(client, add_product):
    for i in range(1, 4):
        add_product(i, category="A")
    add_product(4, category="B")
    add_product(5, category="C", dateOfSale="2021-01-01T10:00:00+05:30")

    r = client.get("/pie-chart", params={"month": "march"})
    assert r.status_code == 200
    assert sorted(r.json(), key=lambda c: c["category"]) == [
        {"category": "A", "itemCount": 3},
        {"category": "B", "itemCount": 1},
    ]


def test_combined_response(client, add_product):
    add_product(1, title="Laptop", price=500, sold=1, category="electronics")
    add_product(2, title="Shirt", price=20, sold=0, category="clothing")
    add_product(3, title="Laptop bag", price=40, sold=1, category="electronics")

    r = client.get("/combined-response", params={"month": "march", "search": "laptop", "perPage": 1})
    assert r.status_code == 200
    body = r.json()
    assert set(body) == {"transactions", "statistics", "barChart", "pieChart"}
    assert [t["id"] for t in body["transactions"]] == [1]
    assert body["statistics"] == {
        "selectedMonth": "march",
        "totalSaleAmount": 540,
        "totalSoldItems": 2,
        "totalNotSoldItems": 1,
    }
    assert body["barChart"] == [
        {"priceRange": "0 - 100", "itemCount": 2},
        {"priceRange": "401 - 500", "itemCount": 1},
    ]
    assert sorted(body["pieChart"], key=lambda c: c["category"]) == [
        {"category": "clothing", "itemCount": 1},
        {"category": "electronics", "itemCount": 2},
    ]


def test_combined_response_without_search_lists_month(client, add_product):
    add_product(1)
    add_product(2)

    body = client.get("/combined-response", params={"page": "x"}).json()
    assert [t["id"] for t in body["transactions"]] == [1, 2]
