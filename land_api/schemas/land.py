"""
Land-related Pydantic schemas.
"""
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

EthereumAddress = Annotated[
    str,
    Field(
        pattern=r"^0x[a-fA-F0-9]{40}$",
        examples=["0x742d35Cc6634C0532925a3b8D2DE0f87b7b82fd0"],
        description="Valid Ethereum address (42 characters, starts with 0x)",
    ),
]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )


class TreasuryInfo(CamelModel):
    treasury_wallet: EthereumAddress
    fetched_at: str
    blockchain_call: str = "treasuryWallet()"


class LandInfo(CamelModel):
    token_id: str = Field(examples=["1"])
    block_info: str = Field(examples=["Block A1"])
    parcel_info: str = Field(examples=["Parcel P1"])
    block_parcel_token_uri: str = Field(
        alias="blockParcelTokenURI", examples=["https://example.com/token/1"]
    )
    total_supply: str = Field(examples=["1000"])


class PlotInfo(CamelModel):
    plot_id: str = Field(examples=["1"])
    plot_account: EthereumAddress
    parcel_ids: List[str] = Field(examples=[["101", "102", "103"]])
    parcel_amounts: List[str] = Field(examples=[["1000", "800", "1200"]])


class PlotList(CamelModel):
    plots: List[str] = Field(examples=[["1", "2", "3"]])
    total_plots: int = Field(examples=[3])


class TokenURI(CamelModel):
    token_id: str = Field(examples=["1"])
    uri: str = Field(examples=["https://example.com/token/1"])


class TransferStatus(CamelModel):
    request_id: str
    from_address: EthereumAddress = Field(alias="from")
    to: EthereumAddress
    parcel_id: str
    parcel_amount: str
    is_plot_transfer: bool
    plot_id: str
    timestamp: str
    status: int
    land_authority_approved: bool
    lawyer_approved: bool
    bank_approved: bool
