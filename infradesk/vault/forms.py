from django import forms
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Layout, Submit, Row, Column, HTML, Div

from infradesk.inventory.models import Protocol
from .models import Credential, Note


class CredentialForm(forms.Form):
    """Add/edit form of the credential manager."""

    username = forms.CharField(max_length=255, required=False)
    password = forms.CharField(
        max_length=255,
        required=False,
        strip=False,
        widget=forms.PasswordInput(render_value=True, attrs={'autocomplete': 'new-password'})
    )
    port = forms.IntegerField(min_value=1, max_value=65535, required=False, initial=22)
    protocol = forms.ModelChoiceField(
        queryset=Protocol.objects.none(),
        required=False,
        empty_label='(none)'
    )
    url = forms.CharField(label='URL', max_length=500, required=False)
    note = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}))
    hidden_display = forms.BooleanField(
        label='Hide password by default',
        required=False,
        initial=True
    )

    def __init__(self, *args, editing=False, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['protocol'].queryset = Protocol.objects.order_by('name')
        if editing:
            # Display preference is fixed at creation
            del self.fields['hidden_display']
            # The stored secret is never written into the page
            self.fields['password'].widget = forms.PasswordInput(attrs={'autocomplete': 'new-password'})
            self.fields['password'].help_text = 'Leave blank to keep the current password.'

        self.helper = FormHelper()
        self.helper.form_tag = False
        fields = [
            Row(
                Column('username', css_class='col-md-4'),
                Column('password', css_class='col-md-4'),
                Column('port', css_class='col-md-2'),
                Column('protocol', css_class='col-md-2'),
            ),
            Row(
                Column('url', css_class='col-md-6'),
                Column('note', css_class='col-md-6'),
            ),
        ]
        if not editing:
            fields.append('hidden_display')
        fields.append(
            Div(
                Submit('action', 'Save', css_class='btn-primary btn-sm'),
                HTML('<button type="submit" name="action" value="cancel" '
                     'class="btn btn-secondary btn-sm ms-2" formnovalidate>Cancel</button>'),
                css_class='mt-2'
            )
        )
        self.helper.layout = Layout(*fields)

    @classmethod
    def initial_for(cls, credential):
        return {
            'username': credential.username,
            'port': credential.port,
            'protocol': credential.protocol_id,
            'url': credential.url,
            'note': credential.note,
        }


class NoteForm(forms.Form):
    """Add/edit form of the notes manager."""

    note = forms.CharField(widget=forms.Textarea(attrs={'rows': 3}))
    severity = forms.ChoiceField(
        choices=Note.Severity.choices,
        initial=Note.Severity.INFO
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = FormHelper()
        self.helper.form_tag = False
        self.helper.layout = Layout(
            Row(
                Column('note', css_class='col-md-9'),
                Column('severity', css_class='col-md-3'),
            ),
            Div(
                Submit('action', 'Save', css_class='btn-primary btn-sm'),
                HTML('<button type="submit" name="action" value="cancel" '
                     'class="btn btn-secondary btn-sm ms-2" formnovalidate>Cancel</button>'),
                css_class='mt-2'
            ),
        )

    @classmethod
    def initial_for(cls, note):
        return {'note': note.note, 'severity': note.severity}


class LauncherForm(forms.Form):
    """Choices of the connection launcher."""

    credential = forms.ModelChoiceField(
        queryset=Credential.objects.none(),
        required=False,
        empty_label='(no saved credential)'
    )
    use_custom_credentials = forms.BooleanField(required=False)
    custom_username = forms.CharField(max_length=255, required=False, label='Username')
    custom_password = forms.CharField(
        max_length=255,
        required=False,
        strip=False,
        label='Password',
        widget=forms.PasswordInput(render_value=True, attrs={'autocomplete': 'off'})
    )
    custom_port = forms.IntegerField(min_value=1, max_value=65535, required=False, label='Port')

    def __init__(self, *args, credentials=None, **kwargs):
        super().__init__(*args, **kwargs)
        if credentials is not None:
            self.fields['credential'].queryset = credentials
        self.fields['credential'].label_from_instance = (
            lambda c: f"{c.username or '(no username)'} (port {c.port})"
        )

        self.helper = FormHelper()
        self.helper.form_tag = False
        self.helper.layout = Layout(
            'credential',
            'use_custom_credentials',
            Row(
                Column('custom_username', css_class='col-md-5'),
                Column('custom_password', css_class='col-md-5'),
                Column('custom_port', css_class='col-md-2'),
            ),
            Div(
                Submit('refresh', 'Update command', css_class='btn-outline-primary'),
                css_class='mt-2'
            ),
        )
