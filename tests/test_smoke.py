from fastapi.testclient import TestClient
from qualified_csv.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_parse_upload():
    raw = 'Id,StringColumn,StringWithQuotes,Number1,Number2,Number3\r\n1,test string,"Commas, "In Text" are weird",10,20,30\r\n'.encode("utf-8")

    files = {"file": ("test.csv", raw, "text/csv")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["summary"]["rows"] == 2
    assert data["summary"]["max_columns"] == 6
    assert data["records"][1][2] == '"Commas, "In Text" are weird"'

def test_parse_custom_dialect():
    raw = b"a;'b;c'\r\n"
    files = {"file": ("test.txt", raw, "text/plain")}
    r = client.post("/parse", files=files, params={"delimiter": ";", "text_qualifier": "'"})
    assert r.status_code == 200
    assert r.json()["records"] == [["a", "'b;c'"]]

def test_parse_rejects_other_files():
    files = {"file": ("test.json", b"{}", "application/json")}
    r = client.post("/parse", files=files)
    assert r.status_code == 422

def test_parse_rejects_bad_dialect():
    files = {"file": ("test.csv", b"a,b\r\n", "text/csv")}
    r = client.post("/parse", files=files, params={"delimiter": "ab"})
    assert r.status_code == 422

def test_write():
    body = {
        "records": [["StudentCode", "LastName"], ["12345678", "Smith"]],
        "dialect": {"delimiter": "|"},
    }
    r = client.post("/write", json=body)
    assert r.status_code == 200
    assert r.json() == {"content": "StudentCode|LastName\r\n12345678|Smith\r\n", "lines": 2}

def test_write_rejects_bad_dialect():
    r = client.post("/write", json={"records": [["a"]], "dialect": {"delimiter": ",", "text_qualifier": ","}})
    assert r.status_code == 422
