"""Italian strings for API messages (default language)."""

IT_STRINGS = {
    # === AUTH ===
    "auth_missing_credentials": "Per favore inserisci email e password",
    "auth_error": "Errore di autenticazione",
    "auth_signup_check_email": "Registrazione inviata. Controlla la tua email per confermare la registrazione",
    "auth_signed_in": "Accesso effettuato",
    "auth_signed_out": "Disconnessione effettuata",

    # === ACCESS ===
    "unauthorized": "Devi effettuare l'accesso",
    "forbidden": (
        "Il tuo account non ha i permessi di amministratore. "
        "Contatta l'amministratore del sito per richiedere l'accesso."
    ),

    # === GENERIC ERRORS ===
    "not_found": "Elemento non trovato",
    "validation_error": "Dati non validi",
    "invalid_json": "Il corpo della richiesta deve essere JSON",
    "server_error": "Si è verificato un errore",

    # === MEMBERS ===
    "member_created": "Il nuovo membro è stato aggiunto con successo",
    "member_updated": "I dati del membro sono stati aggiornati con successo",
    "member_deleted": "Il membro è stato eliminato con successo",

    # === BEST GAMES ===
    "game_created": "Il nuovo gioco è stato aggiunto con successo",
    "game_updated": "I dati del gioco sono stati aggiornati con successo",
    "game_deleted": "Il gioco è stato eliminato con successo",

    # === FAQ ===
    "faq_created": "FAQ aggiunta con successo",
    "faq_updated": "FAQ aggiornata con successo",
    "faq_deleted": "FAQ eliminata con successo",
    "faq_activated": "FAQ attivata con successo",
    "faq_deactivated": "FAQ disattivata con successo",

    # === FOOTER ===
    "resource_created": "Risorsa aggiunta con successo",
    "resource_updated": "Risorsa aggiornata con successo",
    "resource_deleted": "Risorsa eliminata con successo",
    "resource_activated": "Risorsa attivata con successo",
    "resource_deactivated": "Risorsa disattivata con successo",

    # === ADMINS ===
    "admin_added": "{email} è ora un amministratore",
    "admin_removed": "{email} non è più un amministratore",
    "admin_cannot_change_self": "Non puoi modificare i tuoi permessi di amministratore",
    "admin_first_protected": "Il primo amministratore non può essere rimosso",
    "admin_not_found": "Amministratore non trovato",
    "bootstrap_ok": "Sei il primo amministratore del sito",
    "bootstrap_refused": "Esiste già un amministratore attivo",
    "bootstrap_disabled": "La creazione del primo amministratore è disabilitata",

    # === FOOTER CATEGORIES ===
    "category_links": "Link",
    "category_social": "Social",
    "category_legal": "Note legali",
    "category_support": "Supporto",
}
