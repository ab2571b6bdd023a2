import pytest
from fastapi.testclient import TestClient

from land_api.api.deps import get_accessor
from land_api.core.accessor import ResourceAccessor
from land_api.core.config import settings
from land_api.main import app

TREASURY_ADDRESS = "0x742d35Cc6634C0532925a3b8D2DE0f87b7b82fd0"
CONTRACT_ADDRESS = "0x1B8683e1885B3ee93524cD58BC10Cf3Ed6af4298"
PLOT_ACCOUNT = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
SENDER = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
RECEIVER = "0x90F79bf6EB2c4f870365E785982E1f101E93b906"


class FakeLandContract:
    """Stands in for LandContract, returning what web3 would after output naming."""

    address = CONTRACT_ADDRESS

    def __init__(self):
        self.calls = []
        # method name -> exception to raise instead of answering
        self.failures = {}
        self.lands = {
            1: {
                "blockInfo": "Block A1",
                "parcelInfo": "Parcel P1",
                "blockParcelTokenURI": "https://example.com/token/1",
                "totalSupply": 1000,
            },
            2: {
                "blockInfo": "Block B7",
                "parcelInfo": "Parcel P9",
                "blockParcelTokenURI": "https://example.com/token/2",
                "totalSupply": 123456789012345678901234567890,
            },
        }

    def _record(self, name, *args):
        self.calls.append((name, args))
        if name in self.failures:
            raise self.failures[name]

    def treasury_wallet(self):
        self._record("treasury_wallet")
        return TREASURY_ADDRESS

    def land_info(self, token_id):
        self._record("land_info", token_id)
        return self.lands[token_id]

    def get_plot_account_info(self, plot_id):
        self._record("get_plot_account_info", plot_id)
        return {
            "plotAccount": PLOT_ACCOUNT,
            "parcelIds": [101, 102, 103],
            "parcelAmounts": [1000, 800, 2**200],
        }

    def get_list_of_total_plots(self):
        self._record("get_list_of_total_plots")
        return [1, 2, 3]

    def get_block_parcel_token_uri(self, token_id):
        self._record("get_block_parcel_token_uri", token_id)
        return f"https://example.com/token/{token_id}"

    def request_status(self, request_id):
        self._record("request_status", request_id)
        return {
            "from": SENDER,
            "to": RECEIVER,
            "parcelId": 101,
            "parcelAmount": 250,
            "isPlotTransfer": False,
            "plotId": 0,
            "timestamp": 1705314600,
            "status": 1,
            "landAuthorityApproved": True,
            "lawyerApproved": False,
            "bankApproved": False,
        }


class CountingFactory:
    """Factory for ResourceAccessor that hands out the fake contract and counts builds."""

    def __init__(self, contract, error=None):
        self.contract = contract
        self.error = error
        self.calls = 0
        self.configs = []

    def __call__(self, config):
        self.calls += 1
        self.configs.append(config)
        if self.error is not None:
            raise self.error
        return self.contract


@pytest.fixture
def fake_contract():
    return FakeLandContract()


@pytest.fixture
def factory(fake_contract):
    return CountingFactory(fake_contract)


@pytest.fixture
def accessor(factory):
    return ResourceAccessor(factory, config={"rpc_url": "http://localhost:8545"}, name="test contract")


@pytest.fixture
def client(accessor, monkeypatch):
    monkeypatch.setattr(settings, "EAGER_INIT", False)
    app.dependency_overrides[get_accessor] = lambda: accessor
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
