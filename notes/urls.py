from django.urls import path
from .views import GraphView, NoteListCreateView, NoteDetailView

# Routes answer with or without a trailing slash.
urlpatterns = [
    path("graph", GraphView.as_view(), name="graph"),
    path("graph/", GraphView.as_view()),
    path("notes", NoteListCreateView.as_view(), name="note-list"),
    path("notes/", NoteListCreateView.as_view()),
    path("notes/<int:pk>", NoteDetailView.as_view(), name="note-detail"),
    path("notes/<int:pk>/", NoteDetailView.as_view()),
]
