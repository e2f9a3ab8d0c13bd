import asyncio
import os

from auth_client import ApiError, AuthClient


async def main():
    async with AuthClient(os.environ.get("AUTH_API_URL", "http://127.0.0.1:8000")) as client:
        try:
            session = await client.login(
                os.environ["AUTH_EMAIL"], os.environ["AUTH_PASSWORD"]
            )
        except ApiError as e:
            print("Login failed:", e.status, e.error_type, e)
            return

        print("Token expires:", session.token.token_expire)
        print("Logged in:", session.user.full_name, session.user.role.name)

        me = await client.auth.me()
        for pr in me.projects_role:
            print("  project", pr.project_id, "->", pr.role.name)

        token = await client.refresh()
        print("Refreshed, new expiry:", token.token_expire)

        await client.logout()
        print("Logged out")

asyncio.run(main())
