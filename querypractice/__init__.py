"""Query Practice - SQLAlchemy 쿼리 작성 연습 프로젝트.

SQLAlchemy query-building practice project built around members and teams.
"""
