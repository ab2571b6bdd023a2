"""
Blockchain interaction utilities.
"""
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict

from eth_account import Account
from web3 import Web3
from web3.exceptions import ContractLogicError, ProviderConnectionError, Web3Exception

from .config import Settings
from .errors import ConfigurationError, ContractConnectionError, OperationError

logger = logging.getLogger(__name__)


def get_web3(rpc_url: str) -> Web3:
    """Get Web3 instance connected to the node."""
    w3 = Web3(Web3.HTTPProvider(rpc_url))

    if not w3.is_connected():
        raise ContractConnectionError(f"Could not connect to {rpc_url}")

    return w3


def load_contract_abi(abi_path: str) -> list:
    """Load a contract ABI from a Hardhat artifact or a bare ABI file."""
    path = Path(abi_path)
    if not path.exists():
        raise ConfigurationError(f"ABI not found: {path}")

    with open(path) as f:
        try:
            artifact = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"ABI file {path} is not valid JSON: {e}") from e

    if isinstance(artifact, dict):
        artifact = artifact.get("abi")
    if not isinstance(artifact, list):
        raise ConfigurationError(f"ABI file {path} has no ABI list")
    return artifact


class LandContract:
    """Read-only view over the land management contract."""

    def __init__(self, contract, abi: list, caller: str):
        self.contract = contract
        self.caller = caller
        self._outputs = {
            entry["name"]: entry.get("outputs", [])
            for entry in abi
            if entry.get("type") == "function"
        }

    @property
    def address(self) -> str:
        return self.contract.address

    @property
    def operations(self) -> Dict[str, Callable[..., Any]]:
        return {
            "get-treasury": self.treasury_wallet,
            "land-info": self.land_info,
            "plot-info": self.get_plot_account_info,
            "plots": self.get_list_of_total_plots,
            "token-uri": self.get_block_parcel_token_uri,
            "transfer-status": self.request_status,
        }

    def treasury_wallet(self) -> str:
        return self._call("treasuryWallet")

    def land_info(self, token_id: int) -> dict:
        return self._call("landInfo", token_id)

    def get_plot_account_info(self, plot_id: int) -> dict:
        return self._call("getPlotAccountInfo", plot_id)

    def get_list_of_total_plots(self) -> list:
        return self._call("getListOfTotalPlots")

    def get_block_parcel_token_uri(self, token_id: int) -> str:
        return self._call("getBlockParcelTokenURI", token_id)

    def request_status(self, request_id: int) -> dict:
        # The contract only lets the request's sender read it; we call as the service account
        return self._call("requestStatus", request_id)

    def _call(self, fn_name: str, *args):
        fn = getattr(self.contract.functions, fn_name)
        try:
            result = fn(*args).call({"from": self.caller})
        except ContractLogicError as e:
            raise OperationError(getattr(e, "message", None) or str(e)) from e
        except (OSError, ProviderConnectionError) as e:
            raise ContractConnectionError(str(e)) from e
        except (Web3Exception, ValueError) as e:
            raise OperationError(str(e)) from e
        return self._name_outputs(fn_name, result)

    def _name_outputs(self, fn_name: str, result):
        """Key multi-value and struct results by their ABI output names."""
        outputs = self._outputs.get(fn_name, [])
        if len(outputs) == 1 and outputs[0].get("type") == "tuple":
            outputs = outputs[0].get("components", [])
        elif len(outputs) < 2:
            return result

        names = [output.get("name") for output in outputs]
        if not all(names) or not isinstance(result, (list, tuple)) or len(result) != len(names):
            return result
        return dict(zip(names, result))


def create_contract_client(settings: Settings) -> LandContract:
    """Build a LandContract from settings, validating config before touching the network."""
    if not settings.RPC_URL:
        raise ConfigurationError("RPC_URL is not set")
    if not settings.CONTRACT_ADDRESS:
        raise ConfigurationError("CONTRACT_ADDRESS is not set")
    if not Web3.is_address(settings.CONTRACT_ADDRESS):
        raise ConfigurationError(f"CONTRACT_ADDRESS is not a valid address: {settings.CONTRACT_ADDRESS}")
    if not settings.PRIVATE_KEY:
        raise ConfigurationError("PRIVATE_KEY is not set")

    try:
        account = Account.from_key(settings.PRIVATE_KEY)
    except ValueError as e:
        raise ConfigurationError(f"PRIVATE_KEY is invalid: {e}") from e

    abi = load_contract_abi(settings.CONTRACT_ABI_PATH)

    w3 = get_web3(settings.RPC_URL)
    contract = w3.eth.contract(
        address=Web3.to_checksum_address(settings.CONTRACT_ADDRESS),
        abi=abi,
    )
    logger.debug(f"Connected to contract {contract.address} via {settings.RPC_URL} as {account.address}")
    return LandContract(contract, abi, account.address)
