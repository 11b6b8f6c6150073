from .editor_presenter import EditorPresenter, IEditorView

__all__ = ["EditorPresenter", "IEditorView"]
