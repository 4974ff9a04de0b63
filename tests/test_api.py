import pytest
from fastapi.testclient import TestClient

from main import app

PREFIX = "/api/grammar"


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_languages(client):
    response = client.get(f"{PREFIX}/languages")
    assert response.status_code == 200
    assert response.json() == [{"code": "ru", "name": "Russian", "nativeName": "Русский"}]


@pytest.mark.parametrize("path, body, expected", [
    ("/inflect", {"word": "инженер", "case": "genitive"}, "инженера"),
    ("/inflect", {"word": "Иванов", "word_type": "family_name", "case": "dative"}, "Иванову"),
    ("/inflect/name", {"name": "Петров Петр Петрович", "case": "dative"}, "Петрову Петру Петровичу"),
    ("/inflect/name", {"name": "Паша", "part": "first", "case": "instrumental"}, "Пашей"),
    ("/inflect/phrase", {"phrase": "Главный инженер", "kind": "profession", "case": "instrumental"},
     "Главным инженером"),
    ("/inflect/phrase", {"phrase": "Отдел кадров", "kind": "organization", "case": "genitive"}, "Отдела кадров"),
    ("/inflect/numeral", {"numeral": "сорок два", "unit": "рубль", "case": "genitive"}, "сорока двух рублей"),
    ("/spell", {"number": "-12.05"}, "минус двенадцать целых пять сотых"),
    ("/spell/ordinal", {"number": "2000000"}, "двухмиллионный"),
    ("/spell/ordinal", {"number": "42801", "gender": "female"}, "сорок две тысячи восемьсот первая"),
])
def test_endpoints(client, path, body, expected):
    response = client.post(PREFIX + path, json=body)
    assert response.status_code == 200
    assert response.json() == {"result": expected}


def test_split_name(client):
    response = client.post(f"{PREFIX}/inflect/name/split", json={"name": "Петров Петр Петрович", "case": "genitive"})
    assert response.status_code == 200
    assert response.json() == {"result": ["Петрова", "Петра", "Петровича"]}


def test_blank_word_is_rejected(client):
    response = client.post(f"{PREFIX}/inflect", json={"word": "  ", "case": "genitive"})
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "E2001_REQUIRED_FIELD_MISSING"
    assert error["category"] == "validation"
    assert error["metadata"]["field"] == "word"


def test_invalid_number(client):
    response = client.post(f"{PREFIX}/spell", json={"number": "сорок"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2002_INVALID_FORMAT"


def test_number_out_of_range(client):
    response = client.post(f"{PREFIX}/spell/ordinal", json={"number": "-5"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2003_OUT_OF_RANGE"


def test_unknown_case_fails_validation(client):
    response = client.post(f"{PREFIX}/inflect", json={"word": "кот", "case": "sideways"})
    assert response.status_code == 422


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc123"})
    assert response.headers["X-Correlation-ID"] == "abc123"
