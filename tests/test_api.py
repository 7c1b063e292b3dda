def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to FinanceDashboard API"}


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["session"] == {"expenses": 0, "invoices": 0}


def test_create_expense(client):
    response = client.post("/api/expenses/", json={"category": "Food", "amount": "50", "description": "lunch"})
    assert response.status_code == 201
    assert response.json() == {"category": "Food", "amount": 50.0, "description": "lunch"}
    assert client.get("/api/expenses/").json() == [{"category": "Food", "amount": 50.0, "description": "lunch"}]


def test_create_expense_invalid_amount(client):
    response = client.post("/api/expenses/", json={"category": "Food", "amount": "", "description": "x"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a valid amount."
    assert client.get("/api/expenses/").json() == []


def test_draft_edit_and_submit(client):
    response = client.patch("/api/expenses/draft", json={"category": "Transport"})
    assert response.json() == {"category": "Transport", "amount": None, "description": ""}

    client.patch("/api/expenses/draft", json={"amount": "20", "description": "bus"})
    assert client.get("/api/expenses/draft").json() == {
        "category": "Transport",
        "amount": "20",
        "description": "bus",
    }

    response = client.post("/api/expenses/draft/submit")
    assert response.status_code == 201
    assert response.json()["amount"] == 20.0
    assert client.get("/api/expenses/draft").json() == {"category": "", "amount": None, "description": ""}


def test_submit_invalid_draft_keeps_draft(client):
    client.patch("/api/expenses/draft", json={"category": "Food", "amount": "abc", "description": "x"})
    response = client.post("/api/expenses/draft/submit")
    assert response.status_code == 400
    assert client.get("/api/expenses/draft").json()["amount"] == "abc"
    assert client.get("/api/expenses/").json() == []


def test_upload_invoices(client):
    client.post("/api/invoices/", files={"file": ("march.pdf", b"%PDF-1.4", "application/pdf")})
    response = client.post("/api/invoices/", files={"file": ("april.pdf", b"%PDF-1.4", "application/pdf")})
    assert response.status_code == 201
    assert response.json() == ["march.pdf", "april.pdf"]
    assert client.get("/api/invoices/").json() == ["march.pdf", "april.pdf"]


def test_upload_without_file_is_noop(client):
    response = client.post("/api/invoices/")
    assert response.status_code == 201
    assert response.json() == []


def test_reserve_goal(client):
    client.post("/api/expenses/", json={"category": "Food", "amount": 50})
    response = client.put("/api/reserve/goal", json={"goal": "200"})
    assert response.status_code == 200
    body = response.json()
    assert body["goal"] == 200.0
    assert body["progress_pct"] == 25.0
    assert body["label"] == "Progress: R$ 50.00 of R$ 200.00 (25.0%)"
    assert client.get("/api/reserve/").json()["progress_pct"] == 25.0


def test_reserve_goal_invalid(client):
    response = client.put("/api/reserve/goal", json={"goal": "lots"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a valid reserve goal."
    assert client.get("/api/reserve/").json()["goal"] == 5000.0


def test_zero_goal_progress_is_defined(client):
    client.put("/api/reserve/goal", json={"goal": 0})
    client.post("/api/expenses/", json={"category": "Food", "amount": 50})
    assert client.get("/api/reserve/").json()["progress_pct"] == 100.0


def test_dashboard_scenario(client):
    for category, amount, description in [("Food", 50, "lunch"), ("Food", 30, "snack"), ("Transport", 20, "bus")]:
        client.post("/api/expenses/", json={"category": category, "amount": amount, "description": description})
    client.put("/api/reserve/goal", json={"goal": 100})

    body = client.get("/api/dashboard/").json()
    assert body["total_spent"] == 100.0
    assert body["progress_pct"] == 100.0
    assert [(t["category"], t["total"]) for t in body["category_totals"]] == [("Food", 80.0), ("Transport", 20.0)]

    chart = client.get("/api/dashboard/chart").json()
    assert chart == body["category_totals"]


def test_dashboard_reset(client):
    client.post("/api/expenses/", json={"category": "Food", "amount": 50})
    client.post("/api/invoices/", files={"file": ("march.pdf", b"x", "application/pdf")})

    body = client.delete("/api/dashboard/").json()
    assert body["expenses"] == []
    assert body["invoices"] == []
    assert body["reserve_goal"] == 5000.0
    assert body["progress_pct"] == 0


def test_reports(client):
    client.post("/api/expenses/", json={"category": "Food", "amount": 12.5, "description": "lunch"})

    pdf = client.get("/api/reports/summary.pdf")
    assert pdf.status_code == 200
    assert pdf.headers["content-type"] == "application/pdf"
    assert pdf.content.startswith(b"%PDF")

    csv_response = client.get("/api/reports/expenses.csv")
    assert csv_response.status_code == 200
    assert csv_response.text.splitlines() == ["category,amount,description", "Food,12.50,lunch"]


def test_draft_explicit_null_clears_amount(client):
    client.patch("/api/expenses/draft", json={"category": "Food", "amount": "20"})
    response = client.patch("/api/expenses/draft", json={"amount": None})
    assert response.json() == {"category": "Food", "amount": None, "description": ""}
    assert client.get("/api/expenses/draft").json()["amount"] is None

    assert client.post("/api/expenses/draft/submit").status_code == 400
    assert client.get("/api/expenses/").json() == []


def test_create_expense_negative_amount(client):
    response = client.post("/api/expenses/", json={"category": "Food", "amount": -5, "description": "refund"})
    assert response.status_code == 201
    assert response.json()["amount"] == -5.0
    assert client.get("/api/dashboard/chart").json() == []


def test_logging_configured_on_startup_only(monkeypatch):
    from fastapi.testclient import TestClient

    from finance_dashboard import main

    calls = []
    monkeypatch.setattr(main, "configure_logging", lambda: calls.append(True))

    TestClient(main.app).get("/api/health")
    assert calls == []

    with TestClient(main.app) as client:
        assert client.get("/api/health").status_code == 200
    assert calls == [True]
