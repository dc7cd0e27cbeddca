"""Forms for the talks app."""

from django import forms

from django_symposium.talks.models import Bio, TalkRevision


class TalkRevisionForm(forms.ModelForm):
    """Content of a talk.

    Saving never updates a revision in place; the view hands
    ``cleaned_data`` to :mod:`django_symposium.talks.services`, which writes
    a new revision.
    """

    public = forms.BooleanField(required=False, label="Show on my public profile")

    class Meta:
        model = TalkRevision
        fields = ["title", "type", "level", "length", "description", "slides", "organizer_notes"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 6}),
            "organizer_notes": forms.Textarea(attrs={"rows": 3}),
            "length": forms.NumberInput(attrs={"min": "1"}),
        }
        error_messages = {
            "title": {"required": "The title field is required."},
        }

    def clean_length(self) -> int:
        length = self.cleaned_data["length"]
        if length < 1:
            raise forms.ValidationError("The length must be at least 1 minute.")
        return length


class BioForm(forms.ModelForm):
    """Create or edit a speaker bio."""

    class Meta:
        model = Bio
        fields = ["nickname", "body", "public"]
        widgets = {
            "body": forms.Textarea(attrs={"rows": 6}),
        }
        error_messages = {
            "nickname": {"required": "The nickname field is required."},
            "body": {"required": "The body field is required."},
        }


class SubmissionForm(forms.Form):
    """Submit one of the user's talks to a conference."""

    talk_id = forms.IntegerField(widget=forms.HiddenInput)
    conference_id = forms.IntegerField(widget=forms.HiddenInput)
