from rest_framework.exceptions import APIException


class MissingParameterError(APIException):

    def __init__(self, name):
        self.status_code = 400
        self.detail = f"{name} required"


class InvalidParameterError(APIException):

    def __init__(self, name, value):
        self.status_code = 400
        self.detail = f"Invalid value for {name}: {value}"


class UnknownActionError(APIException):

    def __init__(self, action):
        self.status_code = 400
        self.detail = f"Unknown action: {action}"


class UpstreamError(APIException):

    def __init__(self, message):
        self.status_code = 502
        self.detail = message
