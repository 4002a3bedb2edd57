import logging
from typing_extensions import NoReturn

from todo_api.core.exceptions import StorageError

def handle_service_error(error: Exception, service_name: str, operation: str) -> NoReturn:
    logger = logging.getLogger(service_name)
    logger.error(f"Error in {service_name} - {operation}: {str(error)}")

    raise StorageError(
        message=f"Operation failed: {operation}",
        details={"operation": operation, "error": type(error).__name__}
    ) from error
