"""Pydantic 스키마 패키지 - DTO 및 요청/응답 스키마.

Pydantic schema package - projection DTOs and request/response schemas.
"""
