"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Member and team repositories extend BaseRepository for generic CRUD and add
the search, paging, aggregation, and bulk queries of their domain.
"""
