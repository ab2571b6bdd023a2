"""
Getter routes - read-only views over the land management contract.
"""
from fastapi import APIRouter

from ...core.blockchain import LandContract
from ...core.config import settings
from ...core.serialization import to_response_safe, utc_timestamp
from ...schemas.envelope import ErrorEnvelope, SuccessEnvelope
from ...schemas.land import LandInfo, PlotInfo, PlotList, TokenURI, TransferStatus, TreasuryInfo
from ..handler import contract_endpoint, invoke, parse_positive_int

router = APIRouter()

PREFIX = f"{settings.API_PREFIX}/getter"


def _responses(model, description: str) -> dict:
    return {
        200: {"model": SuccessEnvelope[model], "description": description},
        500: {"model": ErrorEnvelope, "description": "Internal server error"},
    }


@router.get(
    "/get-treasury",
    summary="Get Treasury Wallet Address",
    tags=["Treasury"],
    responses=_responses(TreasuryInfo, "Treasury wallet address retrieved successfully"),
)
@contract_endpoint(
    endpoint=f"{PREFIX}/get-treasury",
    failure_message="Failed to fetch treasury wallet",
    success_message="Treasury wallet address retrieved successfully",
)
async def get_treasury(contract: LandContract):
    """Retrieves the treasury wallet address from the smart contract."""
    treasury_wallet = await invoke(contract.treasury_wallet)
    return TreasuryInfo(
        treasury_wallet=str(treasury_wallet),
        fetched_at=utc_timestamp(),
        blockchain_call="treasuryWallet()",
    )


@router.get(
    "/land/{token_id}",
    summary="Get Land Information",
    tags=["Land"],
    responses=_responses(LandInfo, "Land information retrieved successfully"),
)
@contract_endpoint(
    endpoint=f"{PREFIX}/land/{{token_id}}",
    failure_message="Failed to fetch land information",
    success_message="Land information retrieved successfully",
)
async def get_land_info(contract: LandContract, token_id: str):
    """Retrieves detailed information about a specific land token by its ID."""
    token = parse_positive_int(token_id, "token_id")
    land = to_response_safe(await invoke(contract.land_info, token))
    return LandInfo(
        token_id=str(token),
        block_info=land["blockInfo"],
        parcel_info=land["parcelInfo"],
        block_parcel_token_uri=land.get("blockParcelTokenURI", ""),
        total_supply=land["totalSupply"],
    )


@router.get(
    "/plot/{plot_id}/info",
    summary="Get Plot Account Information",
    tags=["Plot"],
    responses=_responses(PlotInfo, "Plot account information retrieved successfully"),
)
@contract_endpoint(
    endpoint=f"{PREFIX}/plot/{{plot_id}}/info",
    failure_message="Failed to fetch plot account information",
    success_message="Plot account information retrieved successfully",
)
async def get_plot_info(contract: LandContract, plot_id: str):
    """Retrieves detailed information about a specific plot account by its ID."""
    plot = parse_positive_int(plot_id, "plot_id")
    info = to_response_safe(await invoke(contract.get_plot_account_info, plot))
    return PlotInfo(
        plot_id=str(plot),
        plot_account=info["plotAccount"],
        parcel_ids=info["parcelIds"],
        parcel_amounts=info["parcelAmounts"],
    )


@router.get(
    "/plots",
    summary="Get All Plots",
    tags=["Plot"],
    responses=_responses(PlotList, "List of all plots retrieved successfully"),
)
@contract_endpoint(
    endpoint=f"{PREFIX}/plots",
    failure_message="Failed to fetch plots list",
    success_message="List of all plots retrieved successfully",
)
async def get_plots(contract: LandContract):
    """Retrieves a list of all plots in the system."""
    plots = to_response_safe(await invoke(contract.get_list_of_total_plots))
    return PlotList(plots=plots, total_plots=len(plots))


@router.get(
    "/token/{token_id}/uri",
    summary="Get Token URI",
    tags=["Token"],
    responses=_responses(TokenURI, "Token URI retrieved successfully"),
)
@contract_endpoint(
    endpoint=f"{PREFIX}/token/{{token_id}}/uri",
    failure_message="Failed to fetch token URI",
    success_message="Token URI retrieved successfully",
)
async def get_token_uri(contract: LandContract, token_id: str):
    """Retrieves the metadata URI of a block/parcel token."""
    token = parse_positive_int(token_id, "token_id")
    uri = await invoke(contract.get_block_parcel_token_uri, token)
    return TokenURI(token_id=str(token), uri=uri)


@router.get(
    "/transfer/{request_id}/status",
    summary="Get Transfer Request Status",
    description="Only the sender of a transfer request can read it on-chain.",
    tags=["Transfer"],
    responses=_responses(TransferStatus, "Transfer request status retrieved successfully"),
)
@contract_endpoint(
    endpoint=f"{PREFIX}/transfer/{{request_id}}/status",
    failure_message="Failed to fetch transfer request status",
    success_message="Transfer request status retrieved successfully",
    warning="This endpoint should have authentication in production",
    note="This may fail if the service account is not the sender of the request",
)
async def get_transfer_status(contract: LandContract, request_id: str):
    """Retrieves the state and approvals of a transfer request."""
    request = parse_positive_int(request_id, "request_id")
    status = to_response_safe(await invoke(contract.request_status, request))
    return TransferStatus(
        request_id=str(request),
        from_address=status["from"],
        to=status["to"],
        parcel_id=status["parcelId"],
        parcel_amount=status["parcelAmount"],
        is_plot_transfer=status["isPlotTransfer"],
        plot_id=status["plotId"],
        timestamp=status["timestamp"],
        status=status["status"],
        land_authority_approved=status["landAuthorityApproved"],
        lawyer_approved=status["lawyerApproved"],
        bank_approved=status["bankApproved"],
    )
