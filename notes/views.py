from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import (
    NoteCreateSerializer,
    NoteSerializer,
    NoteSummarySerializer,
    NoteUpdateSerializer,
)


class GraphView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(services.get_graph(request.user.id))


class NoteListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        notes = services.list_notes(request.user.id)
        return Response(NoteSerializer(notes, many=True).data)

    def post(self, request):
        serializer = NoteCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        note = services.create_note(
            request.user.id,
            serializer.validated_data["title"],
            serializer.validated_data.get("parentId"),
        )
        return Response(NoteSummarySerializer(note).data, status=status.HTTP_201_CREATED)


class NoteDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        note = services.get_note_by_id(request.user.id, pk)
        return Response(NoteSerializer(note).data)

    def put(self, request, pk):
        serializer = NoteUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        note = services.update_note(
            request.user.id,
            pk,
            serializer.validated_data["title"],
            serializer.validated_data["content"],
            serializer.validated_data.get("parentId"),
        )
        return Response({"message": "Note updated", "note": NoteSerializer(note).data})

    def delete(self, request, pk):
        services.delete_note(request.user.id, pk)
        return Response({"message": "Note deleted"})
