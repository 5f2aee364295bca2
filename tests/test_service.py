import json

import pytest
import responses

from bybit_connector import consts
from bybit_connector.client import Client, sign
from bybit_connector.errors import APIError
from bybit_connector.service import new_classical_service, new_uta_service

OK_BODY = {"retCode": 0, "retMsg": "OK", "result": {}, "retExtInfo": {}, "time": 1672025956592}


def make_client():
    return Client(api_key="placeholder", api_secret="secret", base_url=consts.TESTNET)


def test_new_services_set_account_type_and_copy_params():
    params = {"category": "linear"}
    uta = new_uta_service(make_client(), params)
    classic = new_classical_service(make_client())
    params["symbol"] = "BTCUSDT"
    assert uta.is_uta is True
    assert classic.is_uta is False
    assert uta.params == {"category": "linear"}
    assert classic.params == {}


def test_get_server_time_reads_time():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            consts.TESTNET + "/v5/market/time",
            json={"time": "2024-05-20T12:34:56Z"},
            status=200,
        )
        response = new_uta_service(make_client()).get_server_time()
        headers = rsps.calls[0].request.headers
    assert response.time == "2024-05-20T12:34:56Z"
    assert consts.SIGNATURE_KEY not in headers


def test_server_time_result_decoded():
    body = {
        "retCode": 0,
        "retMsg": "OK",
        "result": {"timeSecond": "1688639403", "timeNano": "1688639403423213947"},
        "retExtInfo": {},
        "time": 1688639403423,
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, consts.TESTNET + "/v5/market/time", json=body)
        response = new_uta_service(make_client()).get_server_time()
    assert response.ret_code == 0
    assert response.result["timeNano"] == "1688639403423213947"
    assert response.time == 1688639403423


@pytest.mark.parametrize(
    "factory, endpoint",
    [
        (new_uta_service, "/v5/account/transaction-log"),
        (new_classical_service, "/v5/account/contract-transaction-log"),
    ],
)
def test_transaction_log_endpoint_depends_on_account(factory, endpoint):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, consts.TESTNET + endpoint, json=OK_BODY)
        response = factory(make_client(), {"accountType": "UNIFIED"}).get_transaction_log()
        url = rsps.calls[0].request.url
    assert response.ret_msg == "OK"
    assert url.startswith(consts.TESTNET + endpoint + "?")


def test_signed_get_carries_valid_signature():
    params = {"symbol": "BTCUSDT", "category": "linear"}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, consts.TESTNET + "/v5/account/fee-rate", json=OK_BODY)
        new_uta_service(make_client(), params).get_fee_rates()
        request = rsps.calls[0].request
    query = request.url.split("?", 1)[1]
    headers = request.headers
    assert sorted(query.split("&")) == ["category=linear", "symbol=BTCUSDT"]
    assert headers[consts.API_REQUEST_KEY] == "placeholder"
    assert headers[consts.RECV_WINDOW_KEY] == "5000"
    assert headers[consts.SIGN_TYPE_KEY] == "2"
    expected = sign(
        "secret",
        headers[consts.TIMESTAMP_KEY] + "placeholder" + "5000" + query,
    )
    assert headers[consts.SIGNATURE_KEY] == expected


def test_signed_post_sends_json_body():
    params = {"fromAccountType": "UNIFIED", "toAccountType": "CONTRACT", "coin": "USDT"}
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.POST,
            consts.TESTNET + "/v5/asset/transfer/inter-transfer",
            json=OK_BODY,
        )
        new_uta_service(make_client(), params).create_internal_transfer()
        request = rsps.calls[0].request
    body = request.body.decode() if isinstance(request.body, bytes) else request.body
    assert json.loads(body) == params
    assert request.headers["Content-Type"] == "application/json"
    expected = sign(
        "secret",
        request.headers[consts.TIMESTAMP_KEY] + "placeholder" + "5000" + body,
    )
    assert request.headers[consts.SIGNATURE_KEY] == expected


def test_validation_rejects_none_before_sending():
    with responses.RequestsMock():
        service = new_uta_service(make_client(), {"symbol": None})
        with pytest.raises(ValueError, match="symbol"):
            service.get_fee_rates()


def test_unvalidated_endpoint_sends_anyway():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, consts.TESTNET + "/v5/account/info", json=OK_BODY)
        response = new_uta_service(make_client(), {"symbol": None}).get_account_info()
        calls = len(rsps.calls)
    assert calls == 1
    assert response.ret_code == 0


def test_error_status_raises_api_error():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            consts.TESTNET + "/v5/market/tickers",
            json={"retCode": 10001, "retMsg": "params error"},
            status=400,
        )
        with pytest.raises(APIError) as info:
            new_uta_service(make_client(), {"category": "spot"}).get_market_tickers()
    assert info.value.code == 10001
    assert info.value.message == "params error"


@pytest.mark.parametrize(
    "name, method, endpoint",
    [
        ("get_coin_info", responses.GET, "/v5/asset/coin/query-info"),
        ("get_broker_earning", responses.GET, "/v5/broker/earnings-info"),
        ("get_ins_loan_info", responses.GET, "/v5/ins-loan/product-infos"),
        ("upgrade_to_uta", responses.POST, "/v5/account/upgrade-to-uta"),
        ("get_index_price_kline", responses.GET, "/v5/market/mark-price-kline"),
    ],
)
def test_every_endpoint_group_is_available(name, method, endpoint):
    with responses.RequestsMock() as rsps:
        rsps.add(method, consts.TESTNET + endpoint, json=OK_BODY)
        response = getattr(new_uta_service(make_client()), name)()
        url = rsps.calls[0].request.url
    assert url.startswith(consts.TESTNET + endpoint)
    assert response.ret_msg == "OK"