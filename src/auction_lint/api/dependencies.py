from functools import lru_cache
from typing import Optional

from auction_lint.config import settings
from auction_lint.services.oracle import AIOracle, build_oracle


@lru_cache(maxsize=1)
def _configured_oracle() -> Optional[AIOracle]:
    return build_oracle(settings)


def get_oracle() -> Optional[AIOracle]:
    return _configured_oracle()
