"""Forms for the accounts app."""

from django import forms
from django.contrib.auth import authenticate
from django.contrib.auth.forms import SetPasswordForm
from django.core.files.uploadedfile import UploadedFile
from django.http import HttpRequest

from django_symposium.accounts.models import User
from django_symposium.settings import get_config


def _required(name: str) -> dict[str, str]:
    return {"required": f"The {name} field is required."}


class RegistrationForm(forms.ModelForm):
    """Sign-up form; creates the account with a hashed password."""

    password = forms.CharField(
        widget=forms.PasswordInput(attrs={"id": "password", "autocomplete": "new-password"}),
        error_messages=_required("password"),
    )

    class Meta:
        model = User
        fields = ["name", "email"]
        widgets = {
            "name": forms.TextInput(attrs={"id": "name"}),
            "email": forms.EmailInput(attrs={"id": "email"}),
        }
        error_messages = {
            "name": _required("name"),
            "email": {
                **_required("email"),
                "unique": "The email has already been taken.",
            },
        }

    def clean_email(self) -> str:
        email = User.objects.normalize_email(self.cleaned_data["email"])
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("The email has already been taken.")
        return email

    def save(self, commit: bool = True) -> User:  # noqa: FBT001, FBT002
        user = super().save(commit=False)
        user.set_password(self.cleaned_data["password"])
        if commit:
            user.save()
        return user


class LoginForm(forms.Form):
    """Email/password login form.

    Every failure reports the same message so the form never reveals
    whether an email address is registered.
    """

    INVALID_LOGIN = "These credentials do not match our records."

    email = forms.EmailField(widget=forms.EmailInput(attrs={"id": "email", "autofocus": True}))
    password = forms.CharField(widget=forms.PasswordInput(attrs={"id": "password"}), strip=False)

    def __init__(self, request: HttpRequest | None = None, *args: object, **kwargs: object) -> None:
        self.request = request
        self.user_cache: User | None = None
        super().__init__(*args, **kwargs)

    def clean(self) -> dict[str, object]:
        cleaned_data = super().clean()
        email = cleaned_data.get("email")
        password = cleaned_data.get("password")
        if email and password:
            # Addresses are matched case-insensitively, as sign-up enforces.
            email = User.objects.normalize_email(email)
            account = User.objects.filter(email__iexact=email).only("email").first()
            if account is not None:
                email = account.email
            self.user_cache = authenticate(self.request, email=email, password=password)
            if self.user_cache is None or not self.user_cache.is_active:
                self.user_cache = None
                raise forms.ValidationError(self.INVALID_LOGIN, code="invalid_login")
        return cleaned_data

    def get_user(self) -> User | None:
        """Return the authenticated user after a successful ``is_valid()``."""
        return self.user_cache


class ProfileForm(forms.ModelForm):
    """Account settings form.

    A blank password keeps the current one. Uploaded pictures are checked
    against ``SYMPOSIUM['profile_picture_extensions']`` and
    ``SYMPOSIUM['profile_picture_max_bytes']``.
    """

    password = forms.CharField(
        required=False,
        widget=forms.PasswordInput(attrs={"id": "password", "autocomplete": "new-password"}),
        help_text="Leave blank to keep your current password.",
    )

    class Meta:
        model = User
        fields = [
            "name",
            "email",
            "enable_profile",
            "allow_profile_contact",
            "wants_notifications",
            "profile_slug",
            "profile_intro",
            "profile_picture",
        ]
        widgets = {
            "name": forms.TextInput(attrs={"id": "name"}),
            "email": forms.EmailInput(attrs={"id": "email"}),
            "enable_profile": forms.CheckboxInput(attrs={"id": "enable_profile"}),
            "allow_profile_contact": forms.CheckboxInput(attrs={"id": "allow_profile_contact"}),
            "wants_notifications": forms.CheckboxInput(attrs={"id": "wants_notifications"}),
            "profile_slug": forms.TextInput(attrs={"id": "profile_slug"}),
            "profile_intro": forms.Textarea(attrs={"id": "profile_intro", "rows": 4}),
            "profile_picture": forms.ClearableFileInput(attrs={"id": "profile_picture"}),
        }
        error_messages = {
            "name": _required("name"),
            "email": {
                **_required("email"),
                "unique": "The email has already been taken.",
            },
            "profile_slug": {"unique": "The profile slug has already been taken."},
        }

    def clean_email(self) -> str:
        email = User.objects.normalize_email(self.cleaned_data["email"])
        taken = User.objects.filter(email__iexact=email).exclude(pk=self.instance.pk)
        if taken.exists():
            raise forms.ValidationError("The email has already been taken.")
        return email

    def clean_profile_slug(self) -> str | None:
        return self.cleaned_data.get("profile_slug") or None

    def clean_profile_picture(self) -> object:
        picture = self.cleaned_data.get("profile_picture")
        if not isinstance(picture, UploadedFile):
            return picture
        config = get_config()
        extension = picture.name.rsplit(".", 1)[-1].lower() if "." in picture.name else ""
        if extension not in config.profile_picture_extensions:
            allowed = ", ".join(config.profile_picture_extensions)
            raise forms.ValidationError(f"The profile picture must be a file of type: {allowed}.")
        if picture.size > config.profile_picture_max_bytes:
            raise forms.ValidationError("The profile picture is too large.")
        return picture

    def save(self, commit: bool = True) -> User:  # noqa: FBT001, FBT002
        user = super().save(commit=False)
        password = self.cleaned_data.get("password")
        if password:
            user.set_password(password)
        if commit:
            user.save()
        return user


class ResetPasswordForm(SetPasswordForm):
    """Set-password form with the labels used on the reset page."""

    def __init__(self, *args: object, **kwargs: object) -> None:
        super().__init__(*args, **kwargs)
        self.fields["new_password1"].label = "Password"
        self.fields["new_password1"].widget.attrs["id"] = "password"
        self.fields["new_password2"].label = "Confirm Password"
        self.fields["new_password2"].widget.attrs["id"] = "password_confirmation"
