"""Issue comments posted back to the submitter."""

from collections.abc import Sequence


def format_validation_errors(errors: Sequence[str]) -> str:
    bullets = "\n".join(f"- {error}" for error in errors)
    return (
        "Submission Error\n"
        "\n"
        "Some required fields are missing or invalid:\n"
        f"{bullets}\n"
        "\n"
        "Please edit your issue to provide all required information."
    )


def format_duplicate(app_id: str) -> str:
    return (
        "App Already Exists\n"
        "\n"
        f'An app with the ID "{app_id}" already exists in the repository.\n'
        "Please choose a different App ID or check if this is a duplicate submission."
    )


def format_success(pr_number: int, *, catalog_name: str, community_name: str) -> str:
    """Comment confirming the pull request was opened."""
    return (
        "Submission Processed Successfully!\n"
        "\n"
        "Your app submission has been processed and a Pull Request has been created: "
        f"#{pr_number}\n"
        "\n"
        "**Next Steps:**\n"
        "1. The maintainers will review your submission\n"
        "2. You may be asked to make changes if needed\n"
        f"3. Once approved, your app will be available in the {catalog_name}!\n"
        "\n"
        f"You can track the progress in PR #{pr_number}.\n"
        "\n"
        f"Thank you for contributing to the {community_name}!"
    )


def format_processing_error(message: str) -> str:
    return (
        "Processing Error\n"
        "\n"
        "An error occurred while processing your submission. "
        "Please try again or contact the maintainers.\n"
        "\n"
        f"Error details: {message}"
    )
