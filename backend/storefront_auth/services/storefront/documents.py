"""GraphQL documents used by the authentication core."""

LOGIN_MUTATION = """
mutation LoginMutation($email: String!, $password: String!, $cartEntityId: String) {
  login(email: $email, password: $password, guestCartEntityId: $cartEntityId) {
    customerAccessToken {
      value
      expiresAt
    }
    customer {
      entityId
      firstName
      lastName
      email
    }
  }
}
"""

LOGIN_WITH_JWT_MUTATION = """
mutation LoginWithCustomerLoginJwtMutation($jwt: String!, $cartEntityId: String) {
  loginWithCustomerLoginJwt(jwt: $jwt, guestCartEntityId: $cartEntityId) {
    customerAccessToken {
      value
      expiresAt
    }
    customer {
      entityId
      firstName
      lastName
      email
    }
  }
}
"""

LOGOUT_MUTATION = """
mutation LogoutMutation {
  logout {
    result
  }
}
"""
