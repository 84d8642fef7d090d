"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Query-level failures (NoResultFound, MultipleResultsFound) are SQLAlchemy's
own and propagate unchanged; these cover service-level errors.

Usage:
    from querystudy.utils.exceptions import NotFoundError
    raise NotFoundError("Member not found")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested member or team does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when request parameters are invalid beyond what Pydantic validation
    catches (e.g. an age range whose lower bound exceeds its upper bound).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
