from rest_framework import serializers
from .models import Team, User, PullRequest


class TeamMemberSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(source='id')
    username = serializers.CharField()
    is_active = serializers.BooleanField()

    class Meta:
        model = User
        fields = ['user_id', 'username', 'is_active']


class TeamSerializer(serializers.ModelSerializer):
    team_name = serializers.CharField(source='name')
    members = TeamMemberSerializer(many=True, source='members.all')

    class Meta:
        model = Team
        fields = ['team_name', 'members']


class UserSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(source='id')
    username = serializers.CharField()
    team_name = serializers.CharField(source='team_id', allow_null=True)
    is_active = serializers.BooleanField()

    class Meta:
        model = User
        fields = ['user_id', 'username', 'team_name', 'is_active']


class PullRequestSerializer(serializers.ModelSerializer):
    pull_request_id = serializers.CharField(source='id')
    pull_request_name = serializers.CharField(source='name')
    author_id = serializers.CharField()
    status = serializers.CharField()
    assigned_reviewers = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', format='%Y-%m-%dT%H:%M:%SZ')
    mergedAt = serializers.DateTimeField(source='merged_at', format='%Y-%m-%dT%H:%M:%SZ', allow_null=True)

    class Meta:
        model = PullRequest
        fields = [
            'pull_request_id', 'pull_request_name', 'author_id',
            'status', 'assigned_reviewers', 'createdAt', 'mergedAt'
        ]

    @staticmethod
    def get_assigned_reviewers(obj):
        return sorted(reviewer.id for reviewer in obj.reviewers.all())


class PullRequestShortSerializer(serializers.ModelSerializer):
    pull_request_id = serializers.CharField(source='id')
    pull_request_name = serializers.CharField(source='name')
    author_id = serializers.CharField()
    status = serializers.CharField()

    class Meta:
        model = PullRequest
        fields = ['pull_request_id', 'pull_request_name', 'author_id', 'status']


class TeamMemberInputSerializer(serializers.Serializer):
    user_id = serializers.CharField()
    username = serializers.CharField()
    is_active = serializers.BooleanField()


class TeamAddSerializer(serializers.Serializer):
    team_name = serializers.CharField()
    members = TeamMemberInputSerializer(many=True, allow_empty=True)


class PullRequestCreateSerializer(serializers.Serializer):
    pull_request_id = serializers.CharField()
    pull_request_name = serializers.CharField()
    author_id = serializers.CharField()


class PullRequestMergeSerializer(serializers.Serializer):
    pull_request_id = serializers.CharField()


class PullRequestReassignSerializer(serializers.Serializer):
    pull_request_id = serializers.CharField()
    old_user_id = serializers.CharField()


class SetIsActiveSerializer(serializers.Serializer):
    user_id = serializers.CharField()
    is_active = serializers.BooleanField(default=True)
