"""Import every model module so their tables land on ``Base.metadata``."""
from houseledger.domain.ancillary import models as ancillary_models  # noqa: F401
from houseledger.domain.finance import models as finance_models  # noqa: F401
from houseledger.domain.housethings import models as housethings_models  # noqa: F401
from houseledger.domain.salary import models as salary_models  # noqa: F401
