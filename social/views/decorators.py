from django.shortcuts import redirect


def profile_completion_required(view_function):
    """Send signed-in users with an unfinished profile to the completion page."""
    def modified_view_function(request, *args, **kwargs):
        user = request.user
        if user.is_authenticated and not user.is_profile_complete:
            return redirect("complete_profile")
        return view_function(request, *args, **kwargs)
    return modified_view_function
