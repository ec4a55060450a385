"""서비스 패키지 - 비즈니스 로직 계층.

Service package - converts entities into response schemas and raises the
HTTP exceptions the API layer returns.
"""
