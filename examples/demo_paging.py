"""Paging and refresh demo against the live user service.

Requires API_APP_ID to be set (or present in .env).
"""

import asyncio
import sys

sys.path.insert(0, "src")

from user_manager.application.container import open_use_cases
from user_manager.presentation.state.user_list import UserListStateHolder
from user_manager.shared.config.settings import get_settings


async def main():
    print("=" * 50)
    print("User-Manager - paging demo")
    print("=" * 50)

    async with open_use_cases(get_settings()) as use_cases:
        holder = await UserListStateHolder.create(use_cases.get_all_users, use_cases.delete_user)
        holder.subscribe(lambda state: print(
            f"    [state] {len(state.users)} users, more={state.has_more_pages}, error={state.error}"
        ))

        try:
            print("\n[1] First page")
            for user in holder.state.users[:5]:
                print(f"    {user.id}  {user.display_name}")

            print("\n[2] Scrolling two more pages...")
            await holder.load_more()
            await holder.load_more()
            print(f"    page {holder.current_page + 1} of {holder.total_pages}")

            print("\n[3] Pull to refresh...")
            await holder.refresh()
            print(f"    {len(holder.state.users)} users after refresh")
        finally:
            await holder.close()

    print("\n" + "=" * 50)
    print("Demo finished")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
