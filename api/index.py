"""
Serverless entrypoint for /api/random.

Vercel's Python runtime picks up the ASGI `app`; `vercel.json` rewrites
/api/random and /api/random/health to this file, and the app still sees the
original path. AWS Lambda behind API Gateway uses the Mangum `handler`.

The file is not named random.py: a module of that name would shadow the
standard library `random` whenever api/ is on sys.path.
"""

from mangum import Mangum

from random_image.app import app

handler = Mangum(app, lifespan="off")
