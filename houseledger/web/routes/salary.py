"""API routes for salaries."""
from fastapi import Depends, Path

from houseledger.domain.salary.schemas import SalaryCreate, SalaryOut, SalaryUpdate
from houseledger.domain.salary.services import SalaryService
from houseledger.web.routes.crud import build_crud_router, service_dependency

router = build_crud_router(
    SalaryService, SalaryCreate, SalaryUpdate, SalaryOut, label="Salary", include_inactive=True
)


@router.get("/user/{user_id}", response_model=list[SalaryOut])
async def list_salaries_by_user(
    user_id: int,
    service: SalaryService = Depends(service_dependency(SalaryService)),
):
    return await service.get_by_user(user_id)


@router.get("/year/{year}", response_model=list[SalaryOut])
async def list_salaries_by_year(
    year: str = Path(pattern=r"^\d{4}$"),
    service: SalaryService = Depends(service_dependency(SalaryService)),
):
    return await service.get_by_year(year)
