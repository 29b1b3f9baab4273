"""Hello World — the simplest rue app.

Demonstrates ordered routes, path captures, form values, host prefixes,
Response chaining, a nested router and a custom not-found handler.

Run:
    rue run app:app --reload
"""

from rue import App, Request, Response, Router, param

router = Router()
api = Router()


@router.handle_func("GET", "/")
def index(request: Request):
    return "Hello, World!"


@router.handle_func("GET", "/greet/:name")
def greet(request: Request):
    return f"Hello, {param(request, 'name')}!"


@router.handle_func("POST", "/greet")
async def greet_form(request: Request):
    return f"Hello, {param(request, 'name')}!"


@router.handle_func("GET", "/whoami")
def whoami(request: Request):
    return f"{param(request, '_host')} on {param(request, '_fqdn')}"


@router.handle_func("GET", "/custom")
def custom(request: Request):
    return Response("Created").with_status(201).with_header("X-Custom", "rue")


@api.handle_func("GET", "/api/status")
def status(request: Request):
    return Response('{"status": "ok"}', content_type="application/json")


@api.handle_func("*", "/api/files/...")
def files(request: Request):
    return f"{request.method} {request.path}"


router.handle("*", "/api/", api)


def not_found(request: Request):
    return Response(f"Nothing at {request.path}", status=404)


router.not_found = not_found

app = App(router)


if __name__ == "__main__":
    app.run()
