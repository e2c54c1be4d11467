"""
Forms for Case Management
"""
from django import forms
from django.forms import modelform_factory
from accounts.models import User
from cases.models import CasaCase, CaseAssignment, CaseUpdate
from cases.policy import CASE_FIELDS


class CasaCaseForm(forms.ModelForm):
    """Form for creating/editing cases"""

    class Meta:
        model = CasaCase
        fields = list(CASE_FIELDS)
        widgets = {
            'case_number': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'e.g., CINA-11-1234'
            }),
            'transition_aged_youth': forms.CheckboxInput(attrs={
                'class': 'form-check-input'
            }),
            'court_report_submitted': forms.CheckboxInput(attrs={
                'class': 'form-check-input'
            }),
        }
        labels = {
            'case_number': 'Case Number',
            'transition_aged_youth': 'Transition Aged Youth',
            'court_report_submitted': 'Court Report Submitted',
        }

    def clean_case_number(self):
        """Case numbers are unique within an organization"""
        case_number = self.cleaned_data['case_number']
        taken = CasaCase.objects.filter(
            casa_org_id=self.instance.casa_org_id,
            case_number=case_number
        ).exclude(pk=self.instance.pk).exists()

        if taken:
            raise forms.ValidationError('A case with this case number already exists.')
        return case_number


def case_form_for(fields):
    """A CasaCaseForm restricted to `fields`, kept in declaration order."""
    return modelform_factory(
        CasaCase,
        form=CasaCaseForm,
        fields=[name for name in CASE_FIELDS if name in fields]
    )


class CaseUpdateForm(forms.ModelForm):
    """Form for logging an update on a case"""

    class Meta:
        model = CaseUpdate
        fields = ['update_type', 'other_type_text']
        widgets = {
            'update_type': forms.Select(attrs={'class': 'form-select'}),
            'other_type_text': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Who did you talk to?'
            }),
        }
        labels = {
            'update_type': 'Update Type',
            'other_type_text': 'Other (please specify)',
        }

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('update_type') == 'other' and not cleaned_data.get('other_type_text'):
            self.add_error('other_type_text', 'Please describe the update type.')
        return cleaned_data


class CaseAssignmentForm(forms.Form):
    """Assign one of the organization's volunteers to a case"""
    volunteer = forms.ModelChoiceField(
        queryset=User.objects.none(),
        widget=forms.Select(attrs={'class': 'form-select'}),
        label='Volunteer'
    )

    def __init__(self, *args, casa_case, **kwargs):
        super().__init__(*args, **kwargs)
        self.casa_case = casa_case
        # Volunteers outside the case's organization are not valid choices
        self.fields['volunteer'].queryset = User.objects.volunteers().filter(
            casa_org_id=casa_case.casa_org_id
        ).order_by('email')

    def clean_volunteer(self):
        volunteer = self.cleaned_data['volunteer']
        if CaseAssignment.objects.filter(casa_case=self.casa_case, volunteer=volunteer).exists():
            raise forms.ValidationError('This volunteer is already assigned to the case.')
        return volunteer
