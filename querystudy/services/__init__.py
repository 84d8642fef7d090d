"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services validate search input, call repositories, and convert rows into
response DTOs for the API.
"""
