"""GraphQL query and mutation constants for the GitHub provider."""

QUERY_TEAMS = """
query($organization: String!, $teamsCursor: String, $membersCursor: String) {
  organization(login: $organization) {
    teams(first: 100, after: $teamsCursor) {
      nodes {
        id
        name
        reviewRequestDelegationEnabled
        reviewRequestDelegationAlgorithm
        reviewRequestDelegationMemberCount
        reviewRequestDelegationNotifyTeam
        members(first: 100, after: $membersCursor) {
          nodes { id login name }
          pageInfo { hasNextPage endCursor }
        }
      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

UPDATE_TEAM_REVIEW_ASSIGNMENT = """
mutation($input: UpdateTeamReviewAssignmentInput!) {
  updateTeamReviewAssignment(input: $input) {
    team { id }
  }
}
"""
