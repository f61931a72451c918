"""Static technology catalogs and the recommended-stack heuristic."""

from typing import Sequence

from vibeprompt.schemas.catalog import TechOptionCatalog
from vibeprompt.schemas.project import ProjectType, TechStack


def _option(value: str, label: str, description: str, pros: list[str], difficulty: str) -> dict:
    return {
        "value": value,
        "label": label,
        "description": description,
        "pros": pros,
        "difficulty": difficulty,
    }


def _category(title: str, description: str, options: list[dict]) -> dict:
    return {"title": title, "description": description, "options": options}


MOBILE_APP_CATALOG = TechOptionCatalog.model_validate({
    "frontend": _category(
        "Mobile Development Framework",
        "Technologies for building mobile applications",
        [
            _option("react-native", "React Native", "Cross-platform with JavaScript",
                    ["Single codebase", "Native performance", "Large community"], "Medium"),
            _option("flutter", "Flutter", "Google's cross-platform framework",
                    ["Fast development", "Single codebase", "Great performance"], "Medium"),
            _option("swift", "Swift (iOS)", "Native iOS development",
                    ["Best iOS performance", "Apple ecosystem", "Latest features"], "Hard"),
            _option("kotlin", "Kotlin (Android)", "Native Android development",
                    ["Best Android performance", "Google preferred", "Modern language"], "Hard"),
            _option("ionic", "Ionic", "Web technologies for mobile",
                    ["Web skills reuse", "Rapid prototyping", "Plugin ecosystem"], "Easy"),
        ],
    ),
    "backend": _category(
        "Backend Services",
        "Server-side logic and APIs",
        [
            _option("firebase", "Firebase", "Google's mobile backend platform",
                    ["Real-time sync", "Authentication", "Push notifications"], "Easy"),
            _option("supabase", "Supabase", "Open source Firebase alternative",
                    ["PostgreSQL", "Real-time", "Self-hostable"], "Easy"),
            _option("node", "Node.js", "JavaScript backend",
                    ["Same language", "Fast development", "Large ecosystem"], "Medium"),
        ],
    ),
    "database": _category(
        "Data Storage",
        "Where your app stores data",
        [
            _option("firebase-firestore", "Firestore", "Google's NoSQL database",
                    ["Real-time sync", "Offline support", "Scalable"], "Easy"),
            _option("supabase", "Supabase PostgreSQL", "Managed PostgreSQL",
                    ["SQL database", "Real-time", "Row-level security"], "Easy"),
            _option("sqlite", "SQLite", "Local database",
                    ["Offline-first", "No server needed", "Fast queries"], "Easy"),
        ],
    ),
    "hosting": _category(
        "App Distribution",
        "How users get your app",
        [
            _option("app-stores", "App Stores", "iOS App Store and Google Play",
                    ["Maximum reach", "Built-in payments", "User trust"], "Medium"),
            _option("expo", "Expo", "React Native deployment platform",
                    ["Easy updates", "No app store review", "Quick testing"], "Easy"),
            _option("testflight", "TestFlight + Play Console", "Beta testing platforms",
                    ["User feedback", "Gradual rollout", "Testing tools"], "Medium"),
        ],
    ),
})

GAME_CATALOG = TechOptionCatalog.model_validate({
    "frontend": _category(
        "Game Engine",
        "Framework for building your game",
        [
            _option("unity", "Unity", "Popular cross-platform game engine",
                    ["Visual editor", "Cross-platform", "Asset store"], "Medium"),
            _option("godot", "Godot", "Open source game engine",
                    ["Free and open", "Lightweight", "Easy scripting"], "Easy"),
            _option("phaser", "Phaser", "HTML5 game framework",
                    ["Web-based", "JavaScript", "Great for 2D"], "Easy"),
            _option("unreal", "Unreal Engine", "Professional game engine",
                    ["AAA quality", "Visual scripting", "Great graphics"], "Hard"),
        ],
    ),
    "backend": _category(
        "Backend Services",
        "Online features and data storage",
        [
            _option("none", "No Backend", "Offline game only",
                    ["Simpler to build", "No server costs", "Works offline"], "Easy"),
            _option("firebase", "Firebase", "Google gaming backend",
                    ["Leaderboards", "Player accounts", "Real-time multiplayer"], "Medium"),
            _option("playfab", "PlayFab", "Gaming backend service",
                    ["Built for games", "Analytics", "Monetization tools"], "Medium"),
        ],
    ),
    "database": _category(
        "Data Storage",
        "Saving game progress and player data",
        [
            _option("local", "Local Storage", "Save on device only",
                    ["No internet needed", "Free", "Simple"], "Easy"),
            _option("firebase", "Firebase", "Cloud storage for games",
                    ["Cross-device sync", "Leaderboards", "Easy setup"], "Easy"),
            _option("playfab", "PlayFab Storage", "Gaming-focused storage",
                    ["Player profiles", "Game analytics", "Cloud saves"], "Medium"),
        ],
    ),
    "hosting": _category(
        "Distribution Platform",
        "How players access your game",
        [
            _option("itch", "Itch.io", "Indie game platform",
                    ["Easy publishing", "Indie-friendly", "Built-in community"], "Easy"),
            _option("steam", "Steam", "Major PC gaming platform",
                    ["Largest audience", "Workshop support", "Built-in payments"], "Hard"),
            _option("web", "Web Hosting", "Browser-based game",
                    ["Play anywhere", "No download", "Easy sharing"], "Easy"),
            _option("app-stores", "Mobile App Stores", "iOS/Android stores",
                    ["Mobile reach", "In-app purchases", "Discovery"], "Medium"),
        ],
    ),
})

WEB_APP_CATALOG = TechOptionCatalog.model_validate({
    "frontend": _category(
        "User Interface (Frontend)",
        "What users see and interact with",
        [
            _option("react", "React", "Popular and flexible",
                    ["Large community", "Lots of resources", "Very flexible"], "Medium"),
            _option("vue", "Vue.js", "Easy to learn",
                    ["Beginner friendly", "Good documentation", "Gentle learning curve"], "Easy"),
            _option("nextjs", "Next.js", "React with extra features",
                    ["SEO friendly", "Fast performance", "Built-in features"], "Medium"),
            _option("vanilla", "HTML/CSS/JS", "Pure web basics",
                    ["No framework", "Simple to start", "Full control"], "Easy"),
        ],
    ),
    "backend": _category(
        "Server Logic (Backend)",
        "Handles data processing",
        [
            _option("node", "Node.js", "JavaScript everywhere",
                    ["Same language", "Large ecosystem", "Good performance"], "Medium"),
            _option("supabase", "Supabase", "Backend as a service",
                    ["Quick setup", "Built-in auth", "Real-time features"], "Easy"),
            _option("firebase", "Firebase", "Google backend platform",
                    ["Easy to start", "No server setup", "Free tier"], "Easy"),
            _option("none", "No Backend", "Static site only",
                    ["Fastest setup", "Lowest cost", "No complexity"], "Easy"),
        ],
    ),
    "database": _category(
        "Data Storage",
        "Where your app stores information",
        [
            _option("supabase", "Supabase (PostgreSQL)", "Modern database platform",
                    ["SQL database", "Real-time updates", "Built-in auth"], "Easy"),
            _option("firebase", "Firebase Firestore", "NoSQL cloud database",
                    ["Easy setup", "Real-time sync", "Offline support"], "Easy"),
            _option("mongodb", "MongoDB", "Flexible NoSQL database",
                    ["Flexible schema", "Scales well", "Popular choice"], "Medium"),
            _option("none", "No Database", "Static data only",
                    ["Simplest option", "No setup", "Perfect for simple sites"], "Easy"),
        ],
    ),
    "hosting": _category(
        "Hosting Platform",
        "Where your app lives online",
        [
            _option("vercel", "Vercel", "Modern deployment platform",
                    ["Git integration", "Auto deploy", "Free tier"], "Easy"),
            _option("netlify", "Netlify", "Web app hosting",
                    ["Easy setup", "Free tier", "Great for static"], "Easy"),
            _option("aws", "AWS", "Amazon cloud services",
                    ["Highly scalable", "Full control", "Industry standard"], "Hard"),
            _option("heroku", "Heroku", "Simple app hosting",
                    ["Easy deployment", "Good for beginners", "Add-ons available"], "Easy"),
        ],
    ),
})

FALLBACK_CATALOGS: dict[str, TechOptionCatalog] = {
    ProjectType.MOBILE_APP.value: MOBILE_APP_CATALOG,
    ProjectType.GAME.value: GAME_CATALOG,
}


def fallback_catalog(project_type: str) -> TechOptionCatalog:
    """Static catalog for ``project_type``; the web-app catalog covers everything else."""
    catalog = FALLBACK_CATALOGS.get(project_type, WEB_APP_CATALOG)
    return catalog.model_copy(deep=True)


AUTH_KEYWORDS = ("auth", "login", "user")
DATA_KEYWORDS = ("data", "store", "save")
COMPLEX_FEATURE_COUNT = 5


def _mentions(features: Sequence[str], keywords: Sequence[str]) -> bool:
    return any(keyword in feature.lower() for feature in features for keyword in keywords)


def _prefer(catalog: TechOptionCatalog, category: str, value: str) -> str:
    """``value`` when the catalog offers it, otherwise the category's first option."""
    if catalog.find(category, value) is not None:
        return value
    return catalog.first_value(category)


def recommend_stack(
    project_type: str,
    features: Sequence[str],
    catalog: TechOptionCatalog,
) -> TechStack:
    """
    Pick a sensible default stack from simple feature keywords.

    Mobile apps and games get fixed picks. Web-based projects prefer
    catalog values and fall back to each category's first option.

    Args:
        project_type: Selected project type
        features: Core features collected so far
        catalog: Options currently offered to the user

    Returns:
        Recommended TechStack
    """
    has_auth = _mentions(features, AUTH_KEYWORDS)
    has_data = _mentions(features, DATA_KEYWORDS)
    is_complex = len(features) > COMPLEX_FEATURE_COUNT

    if project_type == ProjectType.MOBILE_APP.value:
        return TechStack(
            frontend="react-native",
            backend="firebase",
            database="firebase-firestore",
            hosting="app-stores",
        )

    if project_type == ProjectType.GAME.value:
        online = has_auth or has_data
        return TechStack(
            frontend="phaser",
            backend="firebase" if online else "none",
            database="firebase" if online else "local",
            hosting="web",
        )

    simple_site = project_type == ProjectType.WEBSITE.value and not is_complex
    return TechStack(
        frontend=_prefer(catalog, "frontend", "vanilla" if simple_site else "react"),
        backend=_prefer(catalog, "backend", "node" if (has_auth or has_data or is_complex) else "none"),
        database=_prefer(catalog, "database", "supabase" if (has_auth or has_data) else "none"),
        hosting=_prefer(catalog, "hosting", "vercel"),
    )
