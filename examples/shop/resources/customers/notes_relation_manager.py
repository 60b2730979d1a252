from panelcore import RelationManager


class NotesRelationManager(RelationManager):
    relationship = "notes"
