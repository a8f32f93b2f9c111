"""English strings for API messages."""

EN_STRINGS = {
    # === AUTH ===
    "auth_missing_credentials": "Please enter email and password",
    "auth_error": "Authentication error",
    "auth_signup_check_email": "Sign up submitted. Check your email to confirm your account",
    "auth_signed_in": "Signed in",
    "auth_signed_out": "Signed out",

    # === ACCESS ===
    "unauthorized": "You need to sign in",
    "forbidden": (
        "Your account does not have admin permissions. "
        "Contact the site administrator to request access."
    ),

    # === GENERIC ERRORS ===
    "not_found": "Item not found",
    "validation_error": "Invalid data",
    "invalid_json": "Request body must be JSON",
    "server_error": "Something went wrong",

    # === MEMBERS ===
    "member_created": "The new member was added successfully",
    "member_updated": "Member updated successfully",
    "member_deleted": "Member deleted successfully",

    # === BEST GAMES ===
    "game_created": "The new game was added successfully",
    "game_updated": "Game updated successfully",
    "game_deleted": "Game deleted successfully",

    # === FAQ ===
    "faq_created": "FAQ added successfully",
    "faq_updated": "FAQ updated successfully",
    "faq_deleted": "FAQ deleted successfully",
    "faq_activated": "FAQ activated successfully",
    "faq_deactivated": "FAQ deactivated successfully",

    # === FOOTER ===
    "resource_created": "Resource added successfully",
    "resource_updated": "Resource updated successfully",
    "resource_deleted": "Resource deleted successfully",
    "resource_activated": "Resource activated successfully",
    "resource_deactivated": "Resource deactivated successfully",

    # === ADMINS ===
    "admin_added": "{email} is now an administrator",
    "admin_removed": "{email} is no longer an administrator",
    "admin_cannot_change_self": "You cannot change your own admin permissions",
    "admin_first_protected": "The first administrator cannot be removed",
    "admin_not_found": "Administrator not found",
    "bootstrap_ok": "You are the first administrator of the site",
    "bootstrap_refused": "An active administrator already exists",
    "bootstrap_disabled": "First administrator setup is disabled",

    # === FOOTER CATEGORIES ===
    "category_links": "Links",
    "category_social": "Social",
    "category_legal": "Legal",
    "category_support": "Support",
}
