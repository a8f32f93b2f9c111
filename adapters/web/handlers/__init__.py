from adapters.web.handlers import public, auth, admin

# Order matters: first match wins
routes = [
    public.routes,
    auth.routes,
    admin.routes,
]
