"""
FastAPI backend for What's For Lunch.

Scrapes the canteen's daily menu page and serves it as a
Mattermost slash command response:
- Resolving buildings to their menu pages
- Extracting the hot dish, vegetarian dish and salad
- Rendering the menu as markdown
"""
