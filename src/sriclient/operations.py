"""Cached operations exposed by :class:`~sriclient.client.SriClient`.

Each entry declares the cache namespace, the resource path and the
ordered parameter names of one client method. Namespaces are shared
with other clients of the API and must not change.
"""

from sriclient.core.entities.operation import Operation

SEARCH_ORGANIZATIONS = Operation(
    name="search_organizations",
    namespace="search-organization",
    path="api/strategy_organizations",
    parameters=("type", "group", "title"),
    relations={"type": "type.id", "group": "group.id"},
)

GET_ORGANIZATION_BY_CRN = Operation(
    name="get_organization_by_crn",
    namespace="search-organization",
    path="api/strategy_organizations",
)

GET_ORGANIZATION_BY_ID = Operation(
    name="get_organization_by_id",
    namespace="get-organization",
    path="api/strategy_organizations/{id}",
)

GET_ORGANIZATION_CATEGORIES = Operation(
    name="get_organization_categories",
    namespace="organization-categories",
    path="api/strategy_organization_categories",
    parameters=("level", "parent"),
    relations={"parent": "parent.id"},
)

GET_ACTIVITIES_BY_FOCUS = Operation(
    name="get_activities_by_focus",
    namespace="activities-by-focus",
    path="api/activities_by_focuses",
    parameters=("organization",),
)

GET_ACTIVITIES_BY_YEAR = Operation(
    name="get_activities_by_year",
    namespace="activities-by-year",
    path="api/activities_by_years",
    parameters=("organization",),
)

GET_ACTIVITIES_BY_SECTOR_COUNCIL = Operation(
    name="get_activities_by_sector_council",
    namespace="activities-by-sector-council",
    path="api/activities_by_sector_councils",
    parameters=("organization",),
)

GET_ACTIVITIES_TIMELINE = Operation(
    name="get_activities_timeline",
    namespace="get-activities-timeline",
    path="api/activities_timeline/",
)

GET_ACTIVITY_DETAIL = Operation(
    name="get_activity_detail",
    namespace="get-activities-timeline",
    path="api/activities_timeline/{id}",
)

OPERATIONS: dict[str, Operation] = {
    operation.name: operation
    for operation in (
        SEARCH_ORGANIZATIONS,
        GET_ORGANIZATION_BY_CRN,
        GET_ORGANIZATION_BY_ID,
        GET_ORGANIZATION_CATEGORIES,
        GET_ACTIVITIES_BY_FOCUS,
        GET_ACTIVITIES_BY_YEAR,
        GET_ACTIVITIES_BY_SECTOR_COUNCIL,
        GET_ACTIVITIES_TIMELINE,
        GET_ACTIVITY_DETAIL,
    )
}

GRAPHQL_PATH = "api/graphql"
