"""GitHub SSH key setup, developer tooling and repository onboarding."""
