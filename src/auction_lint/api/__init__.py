from auction_lint.api.app import app

__all__ = ["app"]
