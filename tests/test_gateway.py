import pytest

from login_dfa.dfa.engine import State
from login_dfa.gateway.protocol import RESET_ACK, Gateway
from login_dfa.gateway.server import create_app
from login_dfa.utils.config import Settings


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(secret_key="test", log_dir=str(tmp_path)))
    app.config["TESTING"] = True
    return app.test_client()


def test_handle_input_protocol():
    gw = Gateway()
    assert gw.handle_input("s1", "u") == "Continue"
    assert gw.handle_input("s1", "p") == "Continue"
    assert gw.handle_input("s1", "s") == "Login Successful"


def test_malformed_symbol_leaves_state_untouched():
    gw = Gateway()
    gw.handle_input("s1", "u")
    before = gw.describe("s1")
    assert gw.handle_input("s1", "x") == "Invalid"
    assert gw.handle_input("s1", None) == "Invalid"
    assert gw.describe("s1") == before
    assert gw.store.get_or_create("s1").state is State.Q1


def test_handle_reset():
    gw = Gateway()
    gw.handle_input("s1", "s")
    assert gw.handle_reset("s1") == RESET_ACK
    assert gw.describe("s1")["state"] == "Q0"


def test_http_full_sequence(client):
    for sym, expected in [("u", "Continue"), ("p", "Continue"), ("s", "Login Successful")]:
        resp = client.get("/input", query_string={"sym": sym})
        assert resp.status_code == 200
        assert resp.mimetype == "text/plain"
        assert resp.get_data(as_text=True) == expected
    assert client.get("/state").get_json()["final"] is True


def test_http_out_of_order_then_reset(client):
    assert client.get("/input?sym=p").get_data(as_text=True) == "Invalid"
    assert client.get("/input?sym=s").get_data(as_text=True) == "Invalid"
    assert client.get("/state").get_json()["state"] == "QE"
    assert client.get("/reset").get_data(as_text=True) == "Reset"
    assert client.get("/input?sym=u").get_data(as_text=True) == "Continue"


def test_http_once_flag(client):
    assert client.get("/input?sym=u&once=1").get_data(as_text=True) == "Continue"
    assert client.get("/input?sym=u&once=1").get_data(as_text=True) == "Continue"
    assert client.get("/state").get_json()["steps"] == 1


def test_http_explicit_session_ids(client):
    client.get("/input?sym=u&sid=alice")
    client.post("/input", data={"sym": "s"}, headers={"X-Session-Id": "bob"})
    assert client.get("/state?sid=alice").get_json()["state"] == "Q1"
    assert client.get("/state", headers={"X-Session-Id": "bob"}).get_json()["state"] == "QE"
    assert client.get("/health").get_json()["sessions"] >= 2


def test_http_missing_symbol_is_invalid(client):
    assert client.get("/input").get_data(as_text=True) == "Invalid"
    assert client.get("/state").get_json()["state"] == "Q0"


def test_once_replay_after_error_is_invalid():
    gw = Gateway()
    assert gw.handle_input("x", "u", once=True) == "Continue"
    assert gw.handle_input("x", "u") == "Invalid"
    assert gw.handle_input("x", "u", once=True) == "Invalid"
    assert gw.describe("x")["state"] == "QE"
