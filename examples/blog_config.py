"""Example schema config.

Render it with:

    gql-sdl render examples/blog_config.py --check
"""

from gql_sdl.core import Headers, PartialConnector, Schema, g

schema = Schema()

role = schema.enum("Role", ["ADMIN", "AUTHOR", "READER"])


def authors_only(rules):
    rules.groups(["admin", "author"]).create().update().delete()
    rules.private().read()


schema.type(
    "User",
    {
        "email": g.email().unique(),
        "name": g.string().search(),
        "role": g.enum_ref(role).default("READER"),
        "posts": g.ref("Post").list().resolver("user/posts").cache({"maxAge": 60}),
    },
)

schema.type(
    "Post",
    {
        "slug": g.string().unique(["author"]),
        "title": g.string().auth(authors_only),
        "author": g.ref("User"),
        "tags": g.string().list().optional(),
        "publishedAt": g.datetime().optional(),
    },
)

schema.query(
    "feed",
    g.ref("Post").optional().list().optional(),
    "feed",
    args={"first": g.int(), "after": g.string().optional()},
)

schema.mutation("publish", g.ref("Post"), "publish", args={"slug": g.string()})


def stripe_headers(headers: Headers):
    headers.push_header("Authorization", "Bearer {{ env.STRIPE_API_KEY }}")
    headers.push_introspection_header("Authorization", "Bearer {{ env.STRIPE_API_KEY }}")


stripe = PartialConnector(
    schema="https://raw.githubusercontent.com/stripe/openapi/master/openapi/spec3.json",
    url="https://api.stripe.com",
    transforms="OPERATION_ID",
    headers=stripe_headers,
)

schema.datasource(stripe, namespace="Stripe")
