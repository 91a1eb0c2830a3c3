class AppStatusCode:
    # ---- Success ----
    DATA_RETRIEVED_SUCCESSFULLY = "200"
    OPERATION_SUCCESSFUL = "201"

    # ---- Validation ----
    INVALID_INPUT = "1001"
    REQUIRED_VALIDATION_ERROR = "1002"

    # ---- Data ----
    NOT_FOUND = "2001"
    DUPLICATE_ADD_ERROR = "2002"
    INSUFFICIENT_STOCK = "2003"

    # ---- Authentication ----
    AUTHENTICATION_TOKEN_INVALID = "3001"
    AUTHENTICATION_TOKEN_EXPIRED = "3002"
    AUTHENTICATION_USER_INVALID = "3003"
    AUTHENTICATION_USER_INACTIVE = "3004"
    AUTHENTICATION_CREDENTIALS_INVALID = "3005"

    # ---- Server ----
    OPERATION_ERROR = "5001"
    OPERATION_FAILED = "5002"
    STORAGE_ERROR = "5003"
