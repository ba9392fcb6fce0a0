from feedback_desk.home.routes import routes as routes_home
from feedback_desk.api import AdminController, FeedbackController

ROUTES = [
    *routes_home,
    FeedbackController,
    AdminController,
]
