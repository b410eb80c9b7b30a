from django import forms


class PageForm(forms.Form):
    """
    Form for submitting a page body.
    """

    body = forms.CharField(widget=forms.Textarea, required=False, strip=False)
