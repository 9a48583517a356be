from __future__ import annotations

import logging

from houseledger.core.crud import CrudService
from houseledger.domain.salary.models import Salary

logger = logging.getLogger(__name__)


class SalaryService(CrudService[Salary]):
    model = Salary
    label = "salary"

    def ordering(self):
        return (Salary.salary_date.desc(), Salary.id.desc())

    async def get_all(self, include_inactive: bool = False) -> list[Salary]:
        if include_inactive:
            return await self._list(self._select())
        return await super().get_all()

    async def get_by_user(self, user_id: int) -> list[Salary]:
        logger.debug("Getting salaries for user: %s", user_id)
        return await self._list(self._active().where(Salary.user_id == user_id))

    async def get_by_year(self, year: str) -> list[Salary]:
        logger.debug("Getting salaries for year: %s", year)
        return await self._list(self._active().where(Salary.refer_year == year))
