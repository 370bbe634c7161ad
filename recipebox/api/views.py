"""
Recipebox API ViewSets.
"""

import logging

from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response

from recipebox.conf import get_store
from recipebox.exceptions import NotFoundError, RecipeError, ValidationError
from .serializers import RecipeSerializer, RecipeUpdateSerializer

logger = logging.getLogger(__name__)


class RecipeViewSet(viewsets.ViewSet):
    """
    ViewSet for Recipe.

    list: List all recipes
    create: Create a new recipe
    retrieve: Get a specific recipe by id
    update: Replace a recipe's name and ingredients
    destroy: Delete a recipe (unknown ids are ignored)

    The store is injected through the ``store`` attribute, e.g.
    ``RecipeViewSet.as_view({"get": "list"}, store=RecipeStore())``.
    When unset, the configured process-wide store is used.
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    renderer_classes = [JSONRenderer]
    serializer_class = RecipeSerializer
    store = None

    def get_store(self):
        if self.store is not None:
            return self.store
        return get_store()

    def list(self, request):
        """
        GET /recipes
        """
        recipes = self.get_store().list()
        return Response(RecipeSerializer(recipes, many=True).data)

    def create(self, request):
        """
        POST /recipes
        {
            "name": "milkshake",
            "ingredients": ["2 tbsp cocoa", "1 cup milk"]
        }
        """
        serializer = RecipeSerializer(data=request.data)

        if not serializer.is_valid():
            logger.warning(f"Rejected recipe create: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            recipe = self.get_store().create(
                serializer.validated_data["name"],
                serializer.validated_data["ingredients"],
            )
        except ValidationError as e:
            logger.warning(f"Rejected recipe create: {e}")
            return Response(e.as_dict(), status=status.HTTP_400_BAD_REQUEST)

        return Response(RecipeSerializer(recipe).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        """
        GET /recipes/{id}
        """
        try:
            recipe = self.get_store().get(pk)
        except NotFoundError as e:
            return Response(e.as_dict(), status=status.HTTP_404_NOT_FOUND)

        return Response(RecipeSerializer(recipe).data)

    def update(self, request, pk=None):
        """
        PUT /recipes/{id}
        {
            "id": "...",  // optional, must match the URL
            "name": "foo",
            "ingredients": ["1 cup milk"]
        }
        """
        store = self.get_store()

        try:
            store.get(pk)
        except NotFoundError as e:
            return Response(e.as_dict(), status=status.HTTP_404_NOT_FOUND)

        serializer = RecipeUpdateSerializer(data=request.data)

        if not serializer.is_valid():
            logger.warning(f"Rejected update of recipe {pk}: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        body_id = serializer.validated_data.get("id")
        if body_id is not None and body_id != pk:
            error = RecipeError("ID_MISMATCH", path_id=pk, body_id=body_id)
            logger.warning(f"Rejected update of recipe {pk}: {error}")
            return Response(error.as_dict(), status=status.HTTP_400_BAD_REQUEST)

        try:
            recipe = store.update(
                pk,
                serializer.validated_data["name"],
                serializer.validated_data["ingredients"],
            )
        except NotFoundError as e:
            return Response(e.as_dict(), status=status.HTTP_404_NOT_FOUND)
        except ValidationError as e:
            logger.warning(f"Rejected update of recipe {pk}: {e}")
            return Response(e.as_dict(), status=status.HTTP_400_BAD_REQUEST)

        return Response(RecipeSerializer(recipe).data)

    def destroy(self, request, pk=None):
        """
        DELETE /recipes/{id}
        """
        self.get_store().delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
