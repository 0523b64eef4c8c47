from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from gymbot.domain.exercises import Exercise, dump_exercises, parse_exercise
from gymbot.services.exercise_service import ExerciseService

router = APIRouter(prefix="/api/exercises", tags=["exercises"])


def _get_exercise_service(request: Request) -> ExerciseService:
    svc = getattr(getattr(request.app, "state", None), "exercise_service", None)
    if not svc:
        raise RuntimeError("ExerciseService not configured")
    return svc


def _parse_body(payload: Any) -> Exercise:
    try:
        return parse_exercise(payload)
    except ValidationError as exc:
        errors = [{**err, "loc": ("body", *err["loc"])} for err in exc.errors(include_url=False)]
        raise RequestValidationError(errors)


def _not_found() -> Response:
    return Response(status_code=404)


@router.get("", response_model=list[Exercise])
def list_exercises(request: Request):
    return _get_exercise_service(request).list_exercises()


@router.get("/grouped")
def exercises_grouped_by_category(request: Request):
    groups = _get_exercise_service(request).group_by_category()
    return {category: dump_exercises(items) for category, items in groups.items()}


@router.get("/grouped/week")
def exercises_grouped_by_week(request: Request):
    groups = _get_exercise_service(request).group_by_week()
    return {week_number: dump_exercises(items) for week_number, items in groups.items()}


@router.get("/week/{week_number}", response_model=list[Exercise])
def exercises_by_week(week_number: int, request: Request):
    return _get_exercise_service(request).get_by_week(week_number)


@router.get("/category/{category}", response_model=list[Exercise])
def exercises_by_category(category: str, request: Request):
    return _get_exercise_service(request).get_by_category(category)


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise(exercise_id: str, request: Request):
    exercise = _get_exercise_service(request).get_by_id(exercise_id)
    if exercise is None:
        return _not_found()
    return exercise


@router.post("", response_model=Exercise, status_code=201)
def create_exercise(request: Request, payload: Any = Body(...)):
    exercise = _parse_body(payload)
    return _get_exercise_service(request).create(exercise)


@router.put("/{exercise_id}", response_model=Exercise)
def update_exercise(exercise_id: str, request: Request, payload: Any = Body(...)):
    exercise = _parse_body(payload)
    updated = _get_exercise_service(request).update(exercise_id, exercise)
    if updated is None:
        return _not_found()
    return updated


@router.delete("/{exercise_id}", status_code=204)
def delete_exercise(exercise_id: str, request: Request):
    if _get_exercise_service(request).delete(exercise_id):
        return Response(status_code=204)
    return _not_found()
