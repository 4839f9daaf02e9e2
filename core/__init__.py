# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the Comic Vine logic for the DC Comics server:
# resource identities, field-list defaults, the HTTP gateway, response
# normalization, and the multi-step lookups.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any transport framework.
#   tools/ depends on core/, never the other way around.  Every operation
#   here takes a ComicVineGateway (core/gateway.py): any object with
#   get(path, params) and search(query, resources, field_list, limit, offset),
#   so the whole package can be exercised with a fake client and no network.
# =============================================================================
