from ..core.accessor import ResourceAccessor
from ..core.blockchain import LandContract, create_contract_client
from ..core.config import settings

# One contract handle per process, built on first use
contract_accessor: ResourceAccessor[LandContract] = ResourceAccessor(
    create_contract_client, settings, name="land contract"
)


def get_accessor() -> ResourceAccessor[LandContract]:
    """Dependency returning the process-wide contract accessor."""
    return contract_accessor
