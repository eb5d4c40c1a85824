"""API routes for Program manipulation"""

from fastapi import APIRouter, Depends, status

from ffportal.middlewares.token import get_user_from_token
from ffportal.models.user import User
from ffportal.schemas.base import MessageSchema, PaginationSchema
from ffportal.schemas.program import (
    ProgramCreateSchema,
    ProgramFiltersSchema,
    ProgramSchema,
    ProgramUpdateSchema,
)
from ffportal.services.program import ProgramService

program_router = APIRouter(prefix="/programs", tags=["Programs"])


@program_router.post(
    "", response_model=ProgramSchema, status_code=status.HTTP_201_CREATED
)
def create_program(
    program: ProgramCreateSchema,
    program_service: ProgramService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return program_service.create(program)


@program_router.get("", response_model=PaginationSchema[ProgramSchema])
def read_programs(
    filters: ProgramFiltersSchema = Depends(),
    skip: int = 0,
    limit: int = 100,
    program_service: ProgramService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return program_service.get_all(filters, skip, limit)


@program_router.get("/{program_id}", response_model=ProgramSchema)
def read_program(
    program_id: int,
    program_service: ProgramService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return program_service.get(program_id)


@program_router.put("/{program_id}", response_model=ProgramSchema)
def update_program(
    program_id: int,
    program_update: ProgramUpdateSchema,
    program_service: ProgramService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    return program_service.update(program_id, program_update)


@program_router.delete("/{program_id}", response_model=MessageSchema)
def archive_program(
    program_id: int,
    program_service: ProgramService = Depends(),
    actor: User = Depends(get_user_from_token),
):
    program_service.archive(program_id)
    return MessageSchema(message="Program archived successfully")
