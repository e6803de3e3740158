class ServiceError(Exception):
    """业务异常基类，携带 HTTP 状态码与错误码"""

    status_code: int = 400
    code: str = "BAD_REQUEST"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(ServiceError):
    """必填字段缺失或为空白"""

    status_code = 400
    code = "VALIDATION_ERROR"


class ConflictError(ServiceError):
    """业务主键冲突"""

    status_code = 409
    code = "CONFLICT"


class NotFoundError(ServiceError):
    status_code = 404
    code = "NOT_FOUND"
