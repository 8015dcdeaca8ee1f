from typing import Any, Optional

from kuberest.tools.repr import disp_document, disp_text


class KubeRestError(Exception):
    pass


class UnsupportedVersionError(KubeRestError):
    """The client knows it cannot handle `kind` under `version`. Callers catch
    this one specifically, so it is never wrapped by the factory."""

    def __init__(self, version: str, kind: str) -> None:
        super().__init__()

        self.version = version
        self.kind = kind

    def __repr__(self) -> str:
        return "%s(version=%r, kind=%r)" % (
            self.__class__.__name__,
            self.version,
            self.kind,
        )

    def __str__(self) -> str:
        return "Unsupported version %r for kind %r" % (self.version, self.kind)


class ResourceFactoryError(KubeRestError):
    pass


class MalformedInputError(ResourceFactoryError):
    def __init__(self, input: Any, reason: str) -> None:
        super().__init__()

        self.input = input
        self.reason = reason

    def __str__(self) -> str:
        return "%s: %s" % (self.reason, disp_text(self.input))


class ResourceCreationError(ResourceFactoryError):
    def __init__(self, version: str, kind: str, document: Any) -> None:
        super().__init__()

        self.version = version
        self.kind = kind
        self.document = document

    def __repr__(self) -> str:
        return "%s(version=%r, kind=%r)" % (
            self.__class__.__name__,
            self.version,
            self.kind,
        )

    def __str__(self) -> str:
        return "Unable to create %s resource kind %s from %s" % (
            self.version,
            self.kind,
            disp_document(self.document),
        )


class ContainerKindMismatchError(ResourceFactoryError):
    def __init__(self, expected: str, actual: Optional[str]) -> None:
        super().__init__()

        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return "Unexpected container type %r for desired kind: %s" % (
            self.actual,
            self.expected,
        )


class UnknownKindError(ResourceFactoryError):
    def __init__(self, kind: str) -> None:
        super().__init__()

        self.kind = kind

    def __str__(self) -> str:
        return "Unable to find resource version from kind %s" % self.kind


class ApiError(KubeRestError):
    def __init__(self, code: int, reason: str, message: str) -> None:
        super().__init__()

        self.code = code
        self.reason = reason
        self.message = message

    def __repr__(self) -> str:
        return "%s(code=%r, reason=%r, message=%r)" % (
            self.__class__.__name__,
            self.code,
            self.reason,
            self.message,
        )

    def __str__(self) -> str:
        return self.__repr__()

    def is_retryable(self) -> bool:
        return self.code in (429, 500, 502, 503, 504)

    def is_not_found(self) -> bool:
        return self.code == 404
