"""
Recipebox API URLs.

Include this in your project's urlpatterns:

    path('', include('recipebox.api.urls')),

Routes have no trailing slash: /recipes and /recipes/{id}.
"""

from rest_framework.routers import DefaultRouter

from .views import RecipeViewSet

router = DefaultRouter(trailing_slash=False)
router.register("recipes", RecipeViewSet, basename="recipe")

urlpatterns = router.urls
