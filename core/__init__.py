# =============================================================================
# core/__init__.py
# =============================================================================
# Framework-free logic for the deep search adapter: data models, the
# capability registry, argument coercion, settings, and the invocation
# handler.
#
# Nothing in this package imports FastMCP or the Linkup SDK.  The search
# client arrives as a constructor argument (see core/handler.py), so every
# module here can be exercised with a fake client and no network.
# =============================================================================
