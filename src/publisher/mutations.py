"""GraphQL documents sent by the publisher."""

DASHBOARD_CREATE_MUTATION = """
mutation CreateDashboard($accountId: Int!, $dashboard: DashboardInput!) {
  dashboardCreate(accountId: $accountId, dashboard: $dashboard) {
    entityResult {
      guid
      name
      accountId
      ... on DashboardEntity {
        permissions
        createdAt
        updatedAt
        dashboardParentGuid
      }
    }
    errors {
      description
      type
    }
  }
}
"""
