from adapters.web.app import create_app
from adapters.web.loader import Container, build_container

__all__ = ["create_app", "Container", "build_container"]
