# --- storefront/model/discount.py ---
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class DiscountCode:
    code: str
    order_index_condition: int   # 1-based order slot this code is bound to
    is_used: bool = False

    def used(self) -> "DiscountCode":
        return replace(self, is_used=True)

    def as_api(self):
        return {
            "code": self.code,
            "isUsed": self.is_used,
            "orderIndexCondition": self.order_index_condition,
        }


class DiscountCheck(NamedTuple):
    valid: bool
    reason: Optional[str] = None
    code: Optional[DiscountCode] = None
