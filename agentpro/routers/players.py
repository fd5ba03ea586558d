from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from agentpro.container import get_notifications, get_roster
from agentpro.errors import NotFoundError
from agentpro.models.api.players import (
    ContractReminderRequest,
    CreatePlayerRequest,
    PerformanceAlertRequest,
    RosterSummaryResponse,
    ScheduledNotificationsResponse,
    UpdatePlayerRequest,
)
from agentpro.models.domain import (
    ContractStatus,
    Document,
    DocumentCategory,
    PlayerProfile,
    PlayerStats,
)
from agentpro.services.notification_service import NotificationService
from agentpro.services.player_roster_service import PlayerRosterService

router = APIRouter()


@router.get("", response_model=List[PlayerProfile])
async def list_players(
    q: Optional[str] = Query(None, description="Search name, club or position"),
    status: Optional[ContractStatus] = Query(
        None, description="Filter by contract status"
    ),
    refresh: bool = Query(False, description="Bypass the roster cache"),
    roster: PlayerRosterService = Depends(get_roster),
) -> List[PlayerProfile]:
    """
    List roster players.

    Query parameters:
    - q: case-insensitive search on name, club or position
    - status: 'under_contract', 'negotiating' or 'free'
    - refresh: reload instead of using the cached roster
    """
    players = roster.list_players(force_refresh=refresh)
    if q:
        players = roster.search(q)
    if status is not None:
        players = [p for p in players if p.contract_status == status]
    return players


@router.post("", response_model=PlayerProfile, status_code=201)
async def add_player(
    request: CreatePlayerRequest,
    roster: PlayerRosterService = Depends(get_roster),
) -> PlayerProfile:
    try:
        return roster.add_player(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/summary", response_model=RosterSummaryResponse)
async def get_roster_summary(
    roster: PlayerRosterService = Depends(get_roster),
) -> RosterSummaryResponse:
    """Player count, total market value, average age and contract mix."""
    return roster.summary()


@router.get("/{player_id}", response_model=PlayerProfile)
async def get_player(
    player_id: UUID, roster: PlayerRosterService = Depends(get_roster)
) -> PlayerProfile:
    try:
        return roster.get_player(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.user_message)


@router.get("/{player_id}/documents", response_model=List[Document])
async def get_player_documents(
    player_id: UUID,
    category: Optional[DocumentCategory] = Query(None),
    roster: PlayerRosterService = Depends(get_roster),
) -> List[Document]:
    try:
        return roster.get_documents(player_id, category)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.user_message)


@router.get("/{player_id}/stats", response_model=List[PlayerStats])
async def get_player_stats(
    player_id: UUID, roster: PlayerRosterService = Depends(get_roster)
) -> List[PlayerStats]:
    try:
        return roster.get_stats(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.user_message)


@router.put("/{player_id}", response_model=PlayerProfile)
async def update_player(
    player_id: UUID,
    request: UpdatePlayerRequest,
    roster: PlayerRosterService = Depends(get_roster),
) -> PlayerProfile:
    """Edit a player. A market value change also raises a market alert."""
    try:
        return roster.update_player(player_id, request)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.user_message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{player_id}", status_code=204)
async def delete_player(
    player_id: UUID, roster: PlayerRosterService = Depends(get_roster)
) -> None:
    try:
        roster.delete_player(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.user_message)


@router.post(
    "/{player_id}/contract-reminders",
    response_model=ScheduledNotificationsResponse,
    status_code=202,
)
async def schedule_contract_reminders(
    player_id: UUID,
    request: ContractReminderRequest,
    roster: PlayerRosterService = Depends(get_roster),
    notifications: NotificationService = Depends(get_notifications),
) -> ScheduledNotificationsResponse:
    """Schedule renewal reminders 30, 14, 7 and 1 day(s) before expiry."""
    try:
        player = roster.get_player(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.user_message)
    ids = await notifications.schedule_contract_reminders(
        player, request.days_until_expiry
    )
    return ScheduledNotificationsResponse(notification_ids=ids)


@router.post(
    "/{player_id}/performance-alerts",
    response_model=ScheduledNotificationsResponse,
    status_code=202,
)
async def schedule_performance_alert(
    player_id: UUID,
    request: PerformanceAlertRequest,
    roster: PlayerRosterService = Depends(get_roster),
    notifications: NotificationService = Depends(get_notifications),
) -> ScheduledNotificationsResponse:
    try:
        player = roster.get_player(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.user_message)
    notification_id = await notifications.schedule_performance_alert(
        player, request.achievement
    )
    return ScheduledNotificationsResponse(notification_ids=[notification_id])
